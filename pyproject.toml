[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matchkit"
version = "0.1.0"
description = "Expressive expectations and matchers for writing readable tests"
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "matchers", "expectations", "assertions", "fakes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing :: Unit",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["matchkit"]

[tool.pytest.ini_options]
addopts = "-ra"
