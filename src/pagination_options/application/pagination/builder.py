"""Application pagination – OptionsBuilder.

Translates decoded request query parameters into :class:`PaginationOptions`.

Usage::

    config = OptionsConfig(
        allowed_query_fields=frozenset({"status"}),
        predefined_aggregates={"byRegion": [{"$group": {"_id": "$region"}}]},
    )
    options = OptionsBuilder().build(
        {"query": '{"status": "active"}', "aggregate": "byRegion", "page": "2"},
        config,
    )
    options.to_dict()
    # {"page": 2, "aggregate": [{"$match": {"status": "active"}},
    #                           {"$group": {"_id": "$region"}}]}
"""
from __future__ import annotations

import json
import re
from typing import Any, Sequence

from pagination_options.application.pagination.aggregates import (
    assemble_pipeline,
    requested_aggregate_keys,
    seed_with_match,
)
from pagination_options.application.pagination.options import PaginationOptions, QueryInput
from pagination_options.application.pagination.query_filter import filter_allowed, flatten, unflatten
from pagination_options.config.options import OptionsConfig, QueryMode
from pagination_options.kernel.errors import InvalidQueryError, UnknownAggregateError
from pagination_options.observability.logging import Logger, get_logger

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")

DEFAULT_CONFIG = OptionsConfig()


def _first(raw: Any) -> Any:
    """Reduce a repeated parameter to its first value."""
    if isinstance(raw, (list, tuple)):
        return raw[0] if raw else None
    return raw


def _is_present(raw: Any) -> bool:
    return raw is not None and raw != ""


def parse_int(raw: str) -> int | float:
    """Parse the leading base-10 integer of *raw*; ``nan`` when there is none."""
    match = _LEADING_INT.match(raw)
    if match is None:
        return float("nan")
    return int(match.group(1))


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def normalize_populate(raw: str | Sequence[str]) -> str:
    if isinstance(raw, str):
        return " ".join(raw.split(","))
    return " ".join(raw)


class OptionsBuilder:
    """Build :class:`PaginationOptions` from a :data:`QueryInput`.

    Stateless apart from the injected *logger*; one instance may serve any
    number of endpoints and concurrent requests.
    """

    def __init__(self, logger: Logger | None = None) -> None:
        self._log: Logger = logger or get_logger(__name__)

    def build(
        self,
        query_input: QueryInput,
        config: OptionsConfig | None = None,
    ) -> PaginationOptions:
        """Translate *query_input* according to *config*.

        Raises
        ------
        InvalidQueryError
            ``query`` is present, filtering is enabled and the value is not a
            JSON object (including ``NaN`` literals and documents nested too
            deeply to process).
        UnknownAggregateError
            A requested aggregate has no predefined pipeline.
        """
        config = config or DEFAULT_CONFIG
        fields: dict[str, Any] = {}

        self._map_shared(query_input, fields)
        if config.mode is QueryMode.LIST:
            self._map_list(query_input, fields)

        raw_query = _first(query_input.get("query"))
        if config.allowed_query_fields and _is_present(raw_query):
            fields["query"] = self._filter_query(raw_query, config)

        raw_aggregate = query_input.get("aggregate")
        if config.predefined_aggregates and raw_aggregate is not None:
            fields["aggregate"] = self._assemble(raw_aggregate, fields.pop("query", None), config)

        options = PaginationOptions(**fields)
        self._log.debug(
            "pagination_options.built",
            mode=config.mode.value,
            fields=sorted(options.to_dict()),
        )
        return options

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    @staticmethod
    def _map_shared(query_input: QueryInput, fields: dict[str, Any]) -> None:
        for name in ("select", "projection", "key"):
            raw = _first(query_input.get(name))
            if _is_present(raw):
                fields[name] = raw

        populate = query_input.get("populate")
        if _is_present(populate):
            fields["populate"] = normalize_populate(populate)

        lean = _first(query_input.get("lean"))
        if _is_present(lean):
            fields["lean"] = lean == "true"

    @staticmethod
    def _map_list(query_input: QueryInput, fields: dict[str, Any]) -> None:
        for name in ("page", "limit"):
            raw = _first(query_input.get(name))
            if _is_present(raw):
                fields[name] = parse_int(raw)

        sort = _first(query_input.get("sort"))
        if _is_present(sort):
            fields["sort"] = sort

        # cursors are opaque: no reduction, no coercion
        for param, name in (("startingAfter", "starting_after"), ("endingBefore", "ending_before")):
            raw = query_input.get(param)
            if _is_present(raw):
                fields[name] = raw

    def _filter_query(self, raw_query: str, config: OptionsConfig) -> dict[str, Any]:
        try:
            document = json.loads(raw_query, parse_constant=_reject_constant)
            if not isinstance(document, dict):
                self._log.warning("pagination_options.invalid_query", reason="not an object")
                raise InvalidQueryError("Query must be a JSON object")
            flat = flatten(document)
        except (TypeError, ValueError, RecursionError) as exc:
            self._log.warning("pagination_options.invalid_query", reason=str(exc) or type(exc).__name__)
            raise InvalidQueryError(cause=exc) from exc
        kept = filter_allowed(flat, config.allowed_query_fields)
        self._log.debug(
            "pagination_options.query_filtered",
            kept=len(kept),
            dropped=len(flat) - len(kept),
        )
        return unflatten(kept)

    def _assemble(
        self,
        raw_aggregate: str | Sequence[str],
        query: dict[str, Any] | None,
        config: OptionsConfig,
    ) -> list[Any]:
        keys = requested_aggregate_keys(raw_aggregate)
        try:
            stages = assemble_pipeline(keys, config.predefined_aggregates)
        except UnknownAggregateError as exc:
            self._log.warning("pagination_options.unknown_aggregate", aggregate=exc.aggregate_key)
            raise
        return seed_with_match(stages, query)


def build_pagination_options(
    query_input: QueryInput,
    config: OptionsConfig | None = None,
) -> PaginationOptions:
    """Functional shortcut for ``OptionsBuilder().build(query_input, config)``."""
    return OptionsBuilder().build(query_input, config)


__all__ = ["DEFAULT_CONFIG", "OptionsBuilder", "build_pagination_options", "normalize_populate", "parse_int"]
