"""Type classifier: maps a parsed document value onto a type tag."""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Any

from bson import Decimal128, ObjectId

from docschema.core.types import (
    BOOLEAN,
    DATA,
    DATE,
    FLOAT,
    INT,
    OBJECT,
    OBJECT_ID,
    STRING,
    TypeTag,
)


def _float_tag(value: float) -> TypeTag:
    if math.isfinite(value) and value.is_integer():
        return INT
    return FLOAT


def _decimal_tag(value: Decimal) -> TypeTag:
    if value.is_finite() and value == value.to_integral_value():
        return INT
    return FLOAT


def classify(value: Any) -> TypeTag:
    """Return the type tag for ``value``.

    Numbers are tagged by value, not by Python type: ``3.0`` is an ``int``.
    Values outside the known tags fall back to their Python type name.
    ``None`` and arrays are handled by the traversal before classification.
    """
    if isinstance(value, ObjectId):
        return OBJECT_ID
    if isinstance(value, date):  # datetime is a date subclass
        return DATE
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, int):
        return INT
    if isinstance(value, float):
        return _float_tag(value)
    if isinstance(value, Decimal128):
        return _decimal_tag(value.to_decimal())
    if isinstance(value, Decimal):
        return _decimal_tag(value)
    if isinstance(value, str):
        return STRING
    if isinstance(value, (bytes, bytearray)):  # includes bson.Binary
        return DATA
    if isinstance(value, Mapping):
        return OBJECT
    return type(value).__name__
