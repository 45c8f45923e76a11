[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonx"
version = "1.0.0"
description = "Map JSON documents to and from declarative element layouts."
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "serialization", "schema", "mapping", "layout"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jsonx-example = "jsonx.example:main"

[tool.hatch.build.targets.wheel]
packages = ["jsonx"]

[tool.hatch.build.targets.sdist]
include = ["jsonx", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["jsonx"]
