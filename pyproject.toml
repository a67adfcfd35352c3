[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sklepik"
version = "0.1.0"
description = "A small grocery shop: a shopping list and a store catalogue with a cart and receipts"
requires-python = ">=3.10"
dependencies = []
keywords = ["shopping list", "store", "cart", "receipt", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Polish",
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

[project.gui-scripts]
sklepik = "sklepik.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["sklepik"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
