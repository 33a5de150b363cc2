[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "depotrack"
version = "0.1.0"
description = "Small warehouse bookkeeping: products, staff, shipping, storage fees and shelf placement"
requires-python = ">=3.10"
dependencies = []
keywords = ["warehouse", "inventory", "shelving", "storage", "logistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
depotrack-shelving = "depotrack.shelving:main"

[tool.hatch.build.targets.wheel]
packages = ["depotrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
