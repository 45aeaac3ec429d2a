# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import SchemaError, StateValidationError, PreconditionError
from .items import ArmorItem, ArmorVector

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    "PreconditionError",
    # core models
    "ArmorItem",
    "ArmorVector",
]
