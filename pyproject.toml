[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smithchess"
version = "0.1.0"
description = "A small chess board model with move generation, Smith-notation move files and a text rendering of the board."
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "board game", "smith notation", "move generation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smithchess = "smithchess.game:main"

[tool.hatch.build.targets.wheel]
packages = ["smithchess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
