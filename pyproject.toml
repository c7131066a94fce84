[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "studykit"
version = "0.1.0"
description = "Classic algorithms, matrix arithmetic, rating maths and concurrency patterns in small, tested modules"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "a-star",
    "dijkstra",
    "floyd-warshall",
    "longest-common-subsequence",
    "longest-increasing-subsequence",
    "matrix-power",
    "elo",
    "producer-consumer",
    "readers-writer",
    "dining-philosophers",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
studykit-astar = "studykit.pathfinding:main"
studykit-shortest-paths = "studykit.shortest_paths:main"
studykit-matrix = "studykit.matrices:main"
studykit-elo = "studykit.elo:main"

[tool.setuptools.packages.find]
include = ["studykit*"]

[tool.pytest.ini_options]
addopts = "-ra"
