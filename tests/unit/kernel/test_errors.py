"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from pagination_options.config import ConfigError, InvalidSettingValueError
from pagination_options.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidQueryError,
    UnknownAggregateError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m", code="c")) == "BaseError(code='c', message='m')"


class TestInvalidQueryError:
    def test_defaults(self) -> None:
        err = InvalidQueryError()
        assert err.code == "invalid_query"
        assert err.message == "Invalid query JSON string"
        assert err.errors == [{"param": "query", "reason": "Invalid query JSON string"}]

    def test_is_validation_error(self) -> None:
        assert issubclass(InvalidQueryError, ValidationError)
        assert issubclass(InvalidQueryError, DomainError)

    def test_to_dict_has_errors(self) -> None:
        d = InvalidQueryError("Query must be a JSON object").to_dict()
        assert d["code"] == "invalid_query"
        assert d["errors"][0]["param"] == "query"


class TestUnknownAggregateError:
    def test_names_the_key(self) -> None:
        err = UnknownAggregateError("byRegion")
        assert err.aggregate_key == "byRegion"
        assert err.message == "Invalid aggregate: byRegion"
        assert err.detail == {"aggregate": "byRegion"}

    def test_code(self) -> None:
        assert UnknownAggregateError("x").code == "unknown_aggregate"

    def test_catchable_as_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            raise UnknownAggregateError("x")


class TestConfigErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(ConfigError, ApplicationError)
        assert issubclass(InvalidSettingValueError, ConfigError)
        assert not issubclass(ConfigError, ValidationError)

    def test_invalid_setting_message(self) -> None:
        err = InvalidSettingValueError("mode", "x", "bad")
        assert err.message == "Setting 'mode' has invalid value 'x': bad"
        assert err.reason == "bad"
