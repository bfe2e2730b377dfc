[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "autorename"
version = "1.0.0"
description = "Watch sub-folders of a working folder and rename new images in a fixed order of names"
requires-python = ">=3.10"
keywords = ["rename", "images", "watch", "folders", "photos"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Utilities",
]
dependencies = [
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
autorename = "autorename.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["autorename"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
