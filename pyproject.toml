[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tocadigital"
version = "0.1.0"
description = "Load a song and podcast catalogue from semicolon-separated files and write backup, producer, favourite and statistics reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "podcast", "catalogue", "reports", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tocadigital = "tocadigital.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tocadigital"]

[tool.pytest.ini_options]
addopts = "-ra"
