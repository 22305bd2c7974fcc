"""Solvers for classic coding-assessment problems, with a command-line front end."""

__version__ = "0.1.0"