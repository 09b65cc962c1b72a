[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unstdkit"
version = "1.0.0"
description = "Small utilities: a compact printf-style formatter, a bounded FIFO queue and IPv4 TCP helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "sprintf", "formatting", "queue", "fifo", "socket", "ipv4", "tcp"]
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

[tool.hatch.build.targets.wheel]
packages = ["unstdkit"]

[tool.pytest.ini_options]
addopts = "-ra"
