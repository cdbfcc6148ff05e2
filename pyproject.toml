[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "samkit"
version = "1.8.0"
description = "Small building blocks: intrusive linked lists, circular queues, xorshift128+ random numbers, power-of-two helpers and host address lookup."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked-list",
    "intrusive-list",
    "circular-queue",
    "xorshift",
    "random",
    "power-of-two",
    "dns",
]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
samkit-bitgen = "samkit.xorshift:main"

[tool.hatch.build.targets.wheel]
packages = ["samkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
