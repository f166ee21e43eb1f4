[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zbplugin"
version = "1.6.1"
description = "Chat bot plugin toolkit: configuration launcher, text games, moderation helpers, bilibili message building and small SQLite-backed collections"
requires-python = ">=3.10"
keywords = ["chatbot", "onebot", "qq", "plugins", "bilibili", "moderation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]
dependencies = [
    "requests",
    "lxml",
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zbplugin = "zbplugin.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zbplugin"]

[tool.hatch.build.targets.sdist]
include = ["zbplugin", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
