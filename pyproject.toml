[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moviesearch"
version = "0.1.0"
description = "Index pipe-separated movie data files by title word and search them over a simple TCP query protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "index", "movies", "inverted-index", "tcp", "server", "client"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
moviesearch-server = "moviesearch.server:main"
moviesearch-multiserver = "moviesearch.multiserver:main"
moviesearch-client = "moviesearch.client:main"

[tool.hatch.build.targets.wheel]
packages = ["moviesearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
