"""
Global Constants
================
Central registry for the numeric tolerance and logger namespace shared by
every intersection routine.

Exports:
    EPSILON (float): Tolerance used by the colinearity, projection, span and
        determinant tests.
    LOGGER_NAME (str): Root logger namespace of the package.
"""

EPSILON: float = 1e-6
LOGGER_NAME: str = "segintersect"
