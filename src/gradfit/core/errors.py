from __future__ import annotations


class GradfitError(Exception):
    """Base class for errors raised by gradfit."""


class DimensionMismatch(GradfitError, ValueError):
    """Operand shapes are incompatible (X vs y vs theta, or a matrix product)."""


class InvalidHyperparameter(GradfitError, ValueError):
    """alpha / iterations / tol outside their valid range."""


class DatasetParseError(GradfitError, ValueError):
    """A data file holds a non-numeric field, a ragged row, or no rows at all."""
