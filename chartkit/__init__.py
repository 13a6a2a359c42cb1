"""Numeric building blocks for charts: matrices, polynomial regression, sequences, derived series and a simple logger."""

__version__ = "0.1.0"