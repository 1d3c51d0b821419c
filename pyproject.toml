[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "lldsims"
version = "0.1.0"
description = "Small object-oriented simulations: an elevator bank, a parking lot and a snakes-and-ladders game"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "elevator", "parking-lot", "snakes-and-ladders", "object-oriented-design"]
classifiers = [
    "Topic :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Environment :: Console",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lldsims-elevator = "lldsims.elevator_sim:main"
lldsims-parking = "lldsims.parking_demo:main"
lldsims-snakes = "lldsims.snakes_cli:main"

[tool.setuptools.packages.find]
include = ["lldsims*"]

[tool.pytest.ini_options]
addopts = "-ra"
