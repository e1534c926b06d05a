"""Config – OptionsConfig, the per-endpoint translation settings."""
from __future__ import annotations

import dataclasses
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from pagination_options.config.validation import InvalidSettingValueError

OPERATOR_PREFIX = "$"


class QueryMode(str, Enum):
    """Whether an endpoint returns one document or a paginated list."""

    SINGLE = "single"
    LIST = "list"


@dataclasses.dataclass(frozen=True)
class OptionsConfig:
    """Static configuration for one call site.

    ``allowed_query_fields`` holds the dot-path prefixes end users may filter
    on; ``predefined_aggregates`` maps aggregate names to their pipeline
    stages.  Both are frozen on construction so a single instance can be
    shared by concurrent requests.
    """

    allowed_query_fields: frozenset[str] = frozenset()
    predefined_aggregates: Mapping[str, tuple[Any, ...]] = dataclasses.field(
        default_factory=lambda: MappingProxyType({})
    )
    mode: QueryMode = QueryMode.LIST

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", self._coerce_mode(self.mode))
        object.__setattr__(
            self, "allowed_query_fields", self._freeze_fields(self.allowed_query_fields)
        )
        object.__setattr__(
            self, "predefined_aggregates", self._freeze_aggregates(self.predefined_aggregates)
        )

    @staticmethod
    def _coerce_mode(mode: QueryMode | str | None) -> QueryMode:
        if mode is None:
            return QueryMode.LIST
        try:
            return QueryMode(mode)
        except ValueError:
            raise InvalidSettingValueError(
                "mode", mode, f"expected one of {[m.value for m in QueryMode]}"
            ) from None

    @staticmethod
    def _freeze_fields(fields: Iterable[str] | None) -> frozenset[str]:
        if isinstance(fields, str):
            raise InvalidSettingValueError(
                "allowed_query_fields", fields, "expected a collection of field names"
            )
        frozen = frozenset(fields or ())
        for name in frozen:
            if not isinstance(name, str) or not name.strip():
                raise InvalidSettingValueError("allowed_query_fields", name, "blank field name")
            if name.startswith(OPERATOR_PREFIX):
                raise InvalidSettingValueError(
                    "allowed_query_fields", name, "operators cannot be allow-listed"
                )
        return frozen

    @staticmethod
    def _freeze_aggregates(
        aggregates: Mapping[str, Any] | None,
    ) -> Mapping[str, tuple[Any, ...]]:
        frozen: dict[str, tuple[Any, ...]] = {}
        for name, pipeline in (aggregates or {}).items():
            if not isinstance(name, str) or not name:
                raise InvalidSettingValueError("predefined_aggregates", name, "blank aggregate name")
            if not isinstance(pipeline, (list, tuple)):
                raise InvalidSettingValueError(
                    f"predefined_aggregates[{name!r}]", pipeline, "pipeline must be a list of stages"
                )
            frozen[name] = tuple(pipeline)
        return MappingProxyType(frozen)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "OptionsConfig":
        """Build from a plain dict using the external camelCase keys.

        Usage::

            OptionsConfig.from_mapping({
                "allowedQueryFields": ["status", "owner"],
                "predefinedAggregates": {"byRegion": [{"$group": {"_id": "$region"}}]},
                "mode": "list",
            })
        """
        return cls(
            allowed_query_fields=frozenset(data.get("allowedQueryFields") or ()),
            predefined_aggregates=data.get("predefinedAggregates") or {},
            mode=data.get("mode") or QueryMode.LIST,
        )


__all__ = ["OPERATOR_PREFIX", "OptionsConfig", "QueryMode"]
