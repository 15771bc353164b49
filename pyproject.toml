[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "escola"
version = "0.1.0"
description = "Register of students, teachers and subjects with roll-call absences, kept in local JSON files"
requires-python = ">=3.10"
dependencies = []
keywords = ["school", "students", "teachers", "attendance", "roll call", "register"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
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
escola = "escola.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["escola"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
