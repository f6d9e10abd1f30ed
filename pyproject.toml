[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "naiasocket"
version = "0.1.0"
description = "Unreliable, unordered UDP packet sockets for game clients and servers, with a link conditioner for simulating network conditions"
requires-python = ">=3.10"
dependencies = []
keywords = ["udp", "socket", "networking", "gamedev", "link-conditioner", "latency"]
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
    "Topic :: System :: Networking",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
naiasocket-demo-server = "naiasocket.demo_server:main"
naiasocket-demo-client = "naiasocket.demo_client:main"

[tool.hatch.build.targets.wheel]
packages = ["naiasocket"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
