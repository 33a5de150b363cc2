from datetime import date

import pytest

from depotrack.warehouse import (
    AlreadyShippedError,
    NotShippedError,
    ProductNotFoundError,
    StaffNotFoundError,
    Warehouse,
    WarehouseError,
)


@pytest.fixture
def depot():
    w = Warehouse()
    w.add_product("B1", "Masa Lambasi", "a1", 10, "01.02.2024")
    w.add_product("B2", "Sandalye", "b3", 20, "05.03.2024")
    w.add_staff(7, "Ali Veli", 30, "Depocu")
    return w


def test_add_and_list_products(depot):
    barcodes = [p.barcode for p in depot.list_products()]
    assert barcodes == ["B1", "B2"]
    assert depot.list_products()[0].shipped is False


def test_remove_product(depot):
    removed = depot.remove_product("B1")
    assert removed.name == "Masa Lambasi"
    assert [p.barcode for p in depot.list_products()] == ["B2"]


def test_remove_missing_product(depot):
    with pytest.raises(ProductNotFoundError):
        depot.remove_product("XX")


def test_add_and_remove_staff(depot):
    depot.add_staff(8, "Ayse Kaya", 25, "Sofor")
    assert [s.staff_id for s in depot.list_staff()] == [7, 8]
    depot.remove_staff(7)
    assert [s.staff_id for s in depot.list_staff()] == [8]


def test_remove_missing_staff(depot):
    with pytest.raises(StaffNotFoundError):
        depot.remove_staff(99)


def test_ship_and_return(depot):
    assert depot.ship_product("B1", 7).shipped is True
    with pytest.raises(AlreadyShippedError):
        depot.ship_product("B1", 7)
    assert depot.return_product("B1", 7).shipped is False
    with pytest.raises(NotShippedError):
        depot.return_product("B1", 7)


def test_ship_requires_known_product_and_staff(depot):
    with pytest.raises(ProductNotFoundError):
        depot.ship_product("XX", 7)
    with pytest.raises(StaffNotFoundError):
        depot.ship_product("B1", 99)
    with pytest.raises(WarehouseError):
        depot.return_product("B2", 99)


def test_save_products_format(depot, tmp_path):
    depot.ship_product("B1", 7)
    path = tmp_path / "urunler.txt"
    depot.save_products(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "2"
    assert lines[1:7] == ["B1", "Masa Lambasi", "a1", "10", "01.02.2024", "1"]
    assert lines[12] == "0"


def test_products_round_trip_drops_shipped(depot, tmp_path):
    depot.ship_product("B2", 7)
    path = tmp_path / "urunler.txt"
    depot.save_products(path)
    other = Warehouse()
    other.add_product("OLD", "x", "y", 1, "01.01.2024")
    other.load_products(path)
    loaded = other.list_products()
    assert [(p.barcode, p.name, p.location, p.box_volume, p.arrival_date) for p in loaded] == [
        (p.barcode, p.name, p.location, p.box_volume, p.arrival_date)
        for p in depot.list_products()
    ]
    assert all(not p.shipped for p in loaded)


def test_staff_round_trip(depot, tmp_path):
    depot.add_staff(8, "Ayse Kaya", 25, "Sofor")
    path = tmp_path / "personel.txt"
    depot.save_staff(path)
    other = Warehouse()
    other.load_staff(path)
    assert other.list_staff() == depot.list_staff()


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        Warehouse().load_products(tmp_path / "yok.txt")


def test_load_malformed_file(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("3\nB1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        Warehouse().load_products(path)


def test_storage_fees_over_free_period(depot):
    fees = depot.storage_fees(date(2024, 3, 10))
    assert [f.barcode for f in fees] == ["B1"]
    assert fees[0].extra_days == 14
    assert fees[0].fee == pytest.approx(168.0)


def test_storage_fees_none_within_free_period(depot):
    assert depot.storage_fees(date(2024, 2, 26)) == []


def test_storage_fees_bad_date():
    w = Warehouse()
    w.add_product("B9", "x", "a1", 10, "bilinmiyor")
    with pytest.raises(ValueError):
        w.storage_fees(date(2024, 3, 10))