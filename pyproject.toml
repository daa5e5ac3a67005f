[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hxlib"
version = "0.1.0"
description = "Support library for a chat client: HAVAL hashing, line history, file helpers and a MegaHAL word model"
requires-python = ">=3.10"
dependencies = []
keywords = ["haval", "hash", "history", "megahal", "markov", "chat"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hxlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
