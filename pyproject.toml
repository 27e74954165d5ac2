[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "booklending"
version = "0.1.0"
description = "A small in-memory library lending system: books, students, teachers and borrowing limits."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "lending", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
booklending-demo = "booklending.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["booklending"]

[tool.pytest.ini_options]
addopts = "-ra"
