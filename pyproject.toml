[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aiquant"
version = "1.0.0"
description = "Streaming and batch technical indicators for quantitative finance"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "finance",
    "trading",
    "technical-analysis",
    "indicators",
    "quant",
    "sma",
    "ema",
    "rsi",
    "macd",
    "bollinger",
    "atr",
    "adx",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aiquant = "aiquant.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aiquant"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
