"""Recursion, backtracking, binary tree, search tree and general tree algorithms."""

__version__ = "0.1.0"