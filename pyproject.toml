[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pickmenu"
version = "1.0.0"
description = "A keyboard-driven menu that reads choices from standard input and prints the one picked, plus a file filter for building its input"
requires-python = ">=3.10"
dependencies = []
keywords = ["menu", "launcher", "keyboard", "selector", "filter", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers :: Applets",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pickmenu = "pickmenu.app:main"
pickmenu-stest = "pickmenu.stest:main"

[tool.hatch.build.targets.wheel]
packages = ["pickmenu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
