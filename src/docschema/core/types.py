"""Type aliases used across docschema."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]
DocName = str
FieldName = str
TypeTag = str

# Tags produced by the classifier
OBJECT_ID = "ObjectId"
DATE = "date"
INT = "int"
FLOAT = "float"
BOOLEAN = "boolean"
STRING = "string"
OBJECT = "object"
DATA = "data"

# Majority type of a field that was only ever seen as null
NO_VALUES = "no-values"

PRIMARY_KEY_FIELD = "_id"
