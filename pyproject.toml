[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "kiloedit"
version = "0.1.0"
description = "A small terminal text editor with Emacs-style keys and syntax highlighting"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "terminal", "text", "syntax-highlighting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kiloedit = "kiloedit.cli:main"

[tool.setuptools.packages.find]
include = ["kiloedit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
