[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spinapp"
version = "0.1.0"
description = "Configuration resolution, HTTP routing and asset preparation for component-based web applications"
requires-python = ">=3.11"
dependencies = []
keywords = ["configuration", "routing", "http", "components", "assets", "templates"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spinapp"]

[tool.pytest.ini_options]
addopts = "-ra"
