[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "symlex"
version = "0.1.0"
description = "Scoped symbol tables and lexical-analysis helpers for a small C-like language"
requires-python = ">=3.10"
dependencies = []
keywords = ["symbol table", "scope", "lexer", "compiler", "tokenizer", "sdbm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
symlex = "symlex.commands:main"

[tool.hatch.build.targets.wheel]
packages = ["symlex"]

[tool.pytest.ini_options]
addopts = "-ra"
