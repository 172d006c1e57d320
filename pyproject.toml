[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termarcade"
version = "0.1.0"
description = "A terminal space shooter and a collection of small curses games and toys"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "curses",
    "terminal",
    "game",
    "arcade",
    "game-of-life",
    "magic-square",
    "n-queens",
    "hanoi",
    "sliding-puzzle",
    "typing-tutor",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termarcade = "termarcade.game:main"
termarcade-life = "termarcade.life:main"
termarcade-magic = "termarcade.magic:main"
termarcade-queens = "termarcade.queens:main"
termarcade-hanoi = "termarcade.hanoi:main"
termarcade-shuffle = "termarcade.shuffle:main"
termarcade-typing = "termarcade.typing:main"
termarcade-panels = "termarcade.panels:main"
termarcade-menu = "termarcade.menu:main"
termarcade-boxes = "termarcade.boxes:main"
termarcade-pager = "termarcade.pager:main"

[tool.hatch.build.targets.wheel]
packages = ["termarcade"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
target-version = "py310"
line-length = 100

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
