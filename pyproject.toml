[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kindkube"
version = "0.1.0"
description = "Kubeconfig merging and removal, HAProxy config rendering and log archive unpacking for local Kubernetes clusters"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["kubernetes", "kubeconfig", "kind", "haproxy", "cluster"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["kindkube"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
