[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "archecs"
version = "0.1.0"
description = "A small archetype-based entity component system with schedules, queries and a levelled logger"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecs", "entity-component-system", "archetype", "game-engine", "scheduling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
archecs-hello-world = "archecs.hello_world:main"
archecs-basic-ecs = "archecs.basic_ecs:main"

[tool.hatch.build.targets.wheel]
packages = ["archecs"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
