[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ferrolearn"
version = "0.1.0"
description = "Backend and presentation logic for an interactive, bilingual Rust learning app"
requires-python = ">=3.11"
keywords = ["rust", "learning", "education", "playground", "i18n", "exercises"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Natural Language :: English",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]
dependencies = [
    "requests>=2.28",
    "markdown-it-py>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
ferrolearn = "ferrolearn.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ferrolearn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
