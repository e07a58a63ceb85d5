[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loxscan"
version = "0.1.0"
description = "A lexical scanner for the Lox language with a file runner and an interactive prompt"
requires-python = ">=3.10"
dependencies = []
keywords = ["lox", "scanner", "lexer", "tokenizer", "interpreter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
loxscan = "loxscan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["loxscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
