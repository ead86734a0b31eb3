[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mathpotato"
version = "0.0.11"
description = "Lexer, syntax tree and parser for MathPotato, a small programming language about mathematics"
requires-python = ">=3.10"
dependencies = []
keywords = ["language", "lexer", "parser", "ast", "interpreter", "mathematics"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mathpotato = "mathpotato.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mathpotato"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
