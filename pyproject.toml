[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tictacnegro"
version = "0.1.0"
description = "Terminal tic-tac-toe for two players in which larger pieces can capture smaller ones"
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "game", "terminal", "board game", "gobblet"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tictacnegro = "tictacnegro.game:main"
tictacnegro-classic = "tictacnegro.classic:main"
tictacnegro-redux = "tictacnegro.redux:main"

[tool.hatch.build.targets.wheel]
packages = ["tictacnegro"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
