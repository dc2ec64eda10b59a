[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hidusages"
version = "0.1.0"
description = "Decode USB HID usage IDs into named usages for a range of HID usage pages"
requires-python = ">=3.10"
dependencies = []
keywords = ["usb", "hid", "usage", "usage-page", "telephony", "power", "scales"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware :: Universal Serial Bus (USB) :: Human Interface Device (HID)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hidusages"]

[tool.hatch.build.targets.sdist]
include = ["hidusages", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
