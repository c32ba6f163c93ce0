[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "movierec"
version = "0.1.0"
description = "Content-based and item-to-item collaborative filtering movie recommendations"
requires-python = ">=3.10"
dependencies = []
keywords = ["recommendation", "collaborative-filtering", "movies", "cosine-similarity"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
movierec = "movierec.cli:main"

[tool.setuptools.packages.find]
include = ["movierec*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
