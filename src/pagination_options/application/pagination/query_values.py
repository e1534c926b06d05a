"""Application pagination – tagged representation of parsed query values.

A value inside a parsed ``query`` document is one of:

* :class:`Scalar` – strings, numbers, booleans, ``null``;
* :class:`SequenceValue` – JSON arrays;
* :class:`ObjectValue` – plain objects, descended into when flattening;
* :class:`OperatorExpression` – objects with at least one ``$``-prefixed key
  (``{"$gte": 18}``), always kept whole.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Union

from pagination_options.config.options import OPERATOR_PREFIX


@dataclasses.dataclass(frozen=True, slots=True)
class Scalar:
    value: Any


@dataclasses.dataclass(frozen=True, slots=True)
class SequenceValue:
    value: list[Any]


@dataclasses.dataclass(frozen=True, slots=True)
class ObjectValue:
    value: dict[str, Any]


@dataclasses.dataclass(frozen=True, slots=True)
class OperatorExpression:
    value: dict[str, Any]


QueryValue = Union[Scalar, SequenceValue, ObjectValue, OperatorExpression]


def is_operator_key(key: object) -> bool:
    return isinstance(key, str) and key.startswith(OPERATOR_PREFIX)


def classify(value: Any) -> QueryValue:
    """Tag a decoded JSON value."""
    if isinstance(value, list):
        return SequenceValue(value)
    if isinstance(value, dict):
        if any(is_operator_key(k) for k in value):
            return OperatorExpression(value)
        return ObjectValue(value)
    return Scalar(value)


__all__ = [
    "ObjectValue",
    "OperatorExpression",
    "QueryValue",
    "Scalar",
    "SequenceValue",
    "classify",
    "is_operator_key",
]
