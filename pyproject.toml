[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wsengine"
version = "0.1.0"
description = "A small WebSocket echo server with JSON configuration, coloured console and file logging, and a priority thread pool."
requires-python = ">=3.10"
keywords = ["websocket", "echo", "server", "logging", "threadpool"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "websockets",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wsengine = "wsengine.main:main"

[tool.hatch.build.targets.wheel]
packages = ["wsengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
