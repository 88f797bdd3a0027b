[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "millionaire"
version = "0.1.0"
description = "A terminal quiz game in the style of 'Who Wants to Be a Millionaire', with lifelines and a countdown."
requires-python = ">=3.10"
dependencies = []
keywords = ["quiz", "game", "terminal", "trivia", "millionaire"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
millionaire = "millionaire.game:main"

[tool.hatch.build.targets.wheel]
packages = ["millionaire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
