"""Application pagination – assembly of predefined aggregation pipelines."""
from __future__ import annotations

import copy
from typing import Any, Mapping, Sequence

from pagination_options.kernel.errors import UnknownAggregateError

MATCH_STAGE = "$match"


def requested_aggregate_keys(raw: str | Sequence[str]) -> list[str]:
    """Repeated parameters are used as given; a string is split on commas."""
    if isinstance(raw, str):
        return [key for key in raw.split(",") if key]
    return list(raw)


def assemble_pipeline(
    keys: Sequence[str],
    predefined: Mapping[str, Sequence[Any]],
) -> list[Any]:
    """Concatenate the predefined stages of *keys* in request order.

    Raises
    ------
    UnknownAggregateError
        On the first key without a predefined pipeline.
    """
    stages: list[Any] = []
    for key in keys:
        if key not in predefined:
            raise UnknownAggregateError(key)
        stages.extend(copy.deepcopy(list(predefined[key])))
    return stages


def seed_with_match(stages: Sequence[Any], query: Mapping[str, Any] | None) -> list[Any]:
    if not query:
        return list(stages)
    return [{MATCH_STAGE: dict(query)}, *stages]


__all__ = ["MATCH_STAGE", "assemble_pipeline", "requested_aggregate_keys", "seed_with_match"]
