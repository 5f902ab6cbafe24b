[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cprlite"
version = "1.10.5"
description = "Building blocks for an HTTP client: header and cookie parsing, request options, URL-encoded containers, multipart parts and a worker thread pool."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "client", "headers", "cookies", "multipart", "threadpool"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cprlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
