"""Noise-perturbed B-spline stroke accumulation."""

__version__ = "0.1.0"
