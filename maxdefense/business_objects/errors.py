# -*- coding: utf-8 -*-
"""
Common exceptions for the business objects layer.
"""


class SchemaError(ValueError):
    """Raised when an input file (caret-delimited text/JSON) violates the expected schema."""


class StateValidationError(ValueError):
    """Raised when the in-memory state violates domain constraints."""


class PreconditionError(ValueError):
    """Raised when a solver is called outside its contract (e.g. too many items)."""
