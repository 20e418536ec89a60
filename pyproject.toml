[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codedrills"
version = "0.1.0"
description = "Small, self-contained programming drills: text tools, maps, sorting, methods, an HTTP echo server and animations"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "education",
    "exercises",
    "examples",
    "algorithms",
    "command-line",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
test = [
    "pytest",
]

[project.scripts]
drill-echo = "codedrills.echo:main"
drill-dup = "codedrills.dup:main"
drill-tempconv = "codedrills.tempconv:main"
drill-fetch = "codedrills.fetch:main"
drill-server = "codedrills.server:main"
drill-lissajous = "codedrills.lissajous:main"
drill-charcount = "codedrills.charcount:main"
drill-toposort = "codedrills.toposort:main"
drill-flags = "codedrills.flags:main"

[tool.hatch.build.targets.wheel]
packages = ["codedrills"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
