[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolabs"
version = "0.1.0"
description = "Classic algorithms and data structures: sorting, closest pair, red-black and interval trees, LCS, Huffman coding and job scheduling"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "quicksort",
    "closest-pair",
    "red-black-tree",
    "interval-tree",
    "lcs",
    "huffman",
    "scheduling",
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
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
algolabs-sort = "algolabs.benchmark:main"
algolabs-closest-pair = "algolabs.closest_pair:main"
algolabs-rbtree = "algolabs.rbtree:main"
algolabs-interval-tree = "algolabs.interval_tree:main"
algolabs-lcs = "algolabs.lcs:main"
algolabs-huffman = "algolabs.huffman:main"
algolabs-schedule = "algolabs.scheduler:main"

[tool.hatch.build.targets.wheel]
packages = ["algolabs"]

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
