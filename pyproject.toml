[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aequa"
version = "0.1.0"
description = "Building blocks for a distributed-validator node: event bus, cluster-lock loading, service lifecycle, logging, Prometheus-style metrics and trace ids."
requires-python = ">=3.11"
dependencies = []
keywords = ["distributed-validator", "lifecycle", "metrics", "prometheus", "event-bus", "tracing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aequa"]

[tool.pytest.ini_options]
addopts = "-ra"
