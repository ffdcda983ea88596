[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "siojson"
version = "0.1.0"
description = "JSON values and objects that carry binary payloads, with typed field access"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "socket.io", "binary", "base64", "serialization"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["siojson"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
