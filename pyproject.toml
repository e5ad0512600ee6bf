[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ebtplay"
version = "1.0.0"
description = "Chiptune synthesizer and four-channel song player that renders to WAV"
requires-python = ">=3.10"
dependencies = []
keywords = ["chiptune", "tracker", "synthesizer", "music", "wav", "1-bit"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ebtplay = "ebtplay.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ebtplay"]

[tool.hatch.build.targets.sdist]
include = ["ebtplay", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
