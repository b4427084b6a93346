[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cadastro-escolar"
version = "1.0.0"
description = "Interactive console register of a school's teachers and students, kept in plain text files."
requires-python = ">=3.10"
dependencies = []
keywords = ["school", "register", "students", "teachers", "console", "cpf"]
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
cadastro-escolar = "cadastro_escolar.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cadastro_escolar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
