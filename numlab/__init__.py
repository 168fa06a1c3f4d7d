"""Numerical methods: vectors and matrices, QR, ODEs, roots, optimisation, splines, special functions and a small network."""

__version__ = "0.1.0"