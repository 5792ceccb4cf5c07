[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calmshell"
version = "0.1.0"
description = "Core of a classic desktop shell: INI files, desktop shortcuts, aliases, 4DOS descriptions, file operations and Program Manager commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "desktop", "file manager", "progman", "descript.ion", "ini", "alias"]
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
    "Topic :: Desktop Environment :: File Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
calmshell = "calmshell.calmira:main"

[tool.hatch.build.targets.wheel]
packages = ["calmshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
