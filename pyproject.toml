[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlab"
version = "0.1.0"
description = "Small numerical methods toolkit: vectors and matrices, QR, adaptive ODE steps, Newton root finding and minimisation, splines, special functions and a tiny neural network"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical methods",
    "qr decomposition",
    "runge-kutta",
    "newton method",
    "splines",
    "gamma function",
    "error function",
    "neural network",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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
numlab-ode = "numlab.ode:main"
numlab-specfuncs = "numlab.specfuncs:main"
numlab-roots = "numlab.roots:main"
numlab-spline = "numlab.spline:main"
numlab-ann = "numlab.ann:main"
numlab-epsilon = "numlab.epsilon:main"
numlab-vec3 = "numlab.vec3:main"
numlab-harmonic = "numlab.harmonic:main"
numlab-sincos = "numlab.sincos_io:main"

[tool.hatch.build.targets.wheel]
packages = ["numlab"]

[tool.pytest.ini_options]
addopts = "-ra"
