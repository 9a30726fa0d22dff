[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskcore"
version = "0.1.0"
description = "A small task executor abstraction layer for asyncio and thread-backed event loops"
requires-python = ">=3.10"
dependencies = []
keywords = ["async", "asyncio", "executor", "tasks", "futures"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
taskcore-demo = "taskcore.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["taskcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
