[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternbook"
version = "0.1.0"
description = "Worked examples of classic object-oriented design patterns: pizza stores, coffee shops, remote controls and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "strategy",
    "observer",
    "decorator",
    "factory",
    "abstract-factory",
    "command",
    "adapter",
    "facade",
    "singleton",
    "template-method",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["patternbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
