[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rmwtypes"
version = "0.1.0"
description = "Middleware-level data types for robotics messaging: QoS profiles, durations, endpoint info and option structures"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "middleware", "qos", "pubsub", "discovery"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rmwtypes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
