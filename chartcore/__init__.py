"""Numeric building blocks for charting: matrices, polynomial regression, value sequences, logarithmic ranges and derived series."""

__version__ = "0.1.0"