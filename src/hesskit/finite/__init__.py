"""Finite-difference building blocks for Hessian computations."""
