[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tutoring"
version = "0.1.0"
description = "Manage tutoring pupils, teachers and lessons, with lesson pricing and in-memory repositories."
requires-python = ">=3.10"
dependencies = []
keywords = ["tutoring", "lessons", "education", "pricing", "repository"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tutoring = "tutoring.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tutoring"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
