[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rotate"
version = "0.0.1"
description = "Front end of the Rotate language compiler: source reading, lexing and compilation logs"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "tokenizer", "programming-language"]
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
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rotate = "rotate.compiler:main"

[tool.hatch.build.targets.wheel]
packages = ["rotate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
