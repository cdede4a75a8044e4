[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "larkit"
version = "0.1.0"
description = "Declarative message card builder and event crypto helpers for Lark/Feishu bots"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["lark", "feishu", "bot", "chat", "message card", "webhook"]
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
    "Topic :: Communications :: Chat",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["larkit"]

[tool.hatch.build.targets.sdist]
include = ["larkit", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
