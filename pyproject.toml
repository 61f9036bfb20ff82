[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "demoapps"
version = "0.1.0"
description = "Two small demo applications: a console model demo and an MVC-style JSON/HTML HTTP server."
requires-python = ">=3.10"
dependencies = []
keywords = ["demo", "http", "server", "mvc", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
demoapps-app1 = "demoapps.app1.cli:main"
demoapps-app2 = "demoapps.app2.router:main"

[tool.hatch.build.targets.wheel]
packages = ["demoapps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
