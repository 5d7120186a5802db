[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tgv"
version = "0.0.3"
description = "Genome browsing models: contigs, regions, viewing windows, gene tracks, alignments and vim-style key handling."
requires-python = ">=3.10"
keywords = [
    "genomics",
    "bioinformatics",
    "genome-browser",
    "bam",
    "alignment",
    "cytoband",
    "refseq",
    "ucsc",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]
dependencies = [
    "httpx",
    "pymysql",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tgv"]

[tool.hatch.build.targets.sdist]
include = [
    "tgv",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
check_untyped_defs = true
