[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dasel"
version = "1.0.0"
description = "Read and write structured data documents in JSON, YAML, TOML, XML and CSV, and split dasel selector strings."
requires-python = ">=3.11"
dependencies = [
    "pyyaml",
    "pygments",
]
keywords = [
    "json",
    "yaml",
    "toml",
    "xml",
    "csv",
    "selector",
    "conversion",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: File Formats :: JSON",
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dasel"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
