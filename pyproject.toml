[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chamada"
version = "0.1.0"
description = "Console class roster: enrol students, record weighted grades and list the students who failed."
requires-python = ">=3.10"
dependencies = []
keywords = ["roster", "students", "grades", "queue", "education"]
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
chamada = "chamada.roster:main"
chamada-notas = "chamada.grades:main"
chamada-fila = "chamada.queue:main"

[tool.hatch.build.targets.wheel]
packages = ["chamada"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
