[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calcnum"
version = "0.1.0"
description = "Classic numerical methods: linear systems, iterative solvers, least squares, QR, interpolation, differentiation, quadrature, ODEs, root finding and optimisation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "linear-algebra",
    "least-squares",
    "interpolation",
    "quadrature",
    "ode",
    "root-finding",
    "optimization",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
calcnum = "calcnum.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["calcnum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
