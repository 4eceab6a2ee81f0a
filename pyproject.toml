[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fmtprint"
version = "0.1.0"
description = "A small printf-style formatter supporting the c, s, p, d, i, u, x, X and % conversions with flags, width and precision."
requires-python = ">=3.10"
keywords = ["printf", "sprintf", "format", "string formatting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fmtprint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
