[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitchess"
version = "0.1.0"
description = "Bitboard chess board with FEN piece placement parsing and precomputed attack tables"
requires-python = ">=3.10"
keywords = ["chess", "bitboard", "fen", "board-game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bitchess = "bitchess.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bitchess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
