[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "apimetrics"
version = "0.1.0"
description = "Vocabulary metrics, naming rules and linters for OpenAPI and Discovery API descriptions"
requires-python = ">=3.10"
keywords = ["openapi", "swagger", "discovery", "lint", "api", "vocabulary", "metrics"]
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
    "Topic :: Software Development :: Quality Assurance",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["apimetrics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
