[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kyopro"
version = "0.1.0"
description = "Competitive-programming algorithms: modular math, max flow, SCC, suffix arrays and contest solutions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "competitive-programming",
    "chinese-remainder-theorem",
    "floor-sum",
    "max-flow",
    "dinic",
    "scc",
    "suffix-array",
    "lcp",
    "z-algorithm",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kyopro = "kyopro.contest:main"

[tool.hatch.build.targets.wheel]
packages = ["kyopro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
