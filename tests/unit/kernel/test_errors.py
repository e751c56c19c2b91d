"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

from mp_featuring.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    DuplicateFeatureError,
    FeatureFlagConflictError,
    TransactionClosedError,
    UnknownFeatureError,
    ValidationError,
)
from mp_featuring.kernel.types import FlaggableRef


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

    def test_str_is_message(self) -> None:
        assert str(BaseError("oops", code="oops", detail={"x": 1})) == "oops"

    def test_to_dict_is_json_serialisable(self) -> None:
        parsed = json.loads(json.dumps(BaseError("oops", code="oops", detail={"x": 1}).to_dict()))
        assert parsed == {"code": "oops", "message": "oops", "detail": {"x": 1}}

    def test_raise_from_sets_cause(self) -> None:
        try:
            try:
                raise KeyError("k")
            except KeyError as exc:
                raise BaseError("wrapped") from exc
        except BaseError as err:
            assert isinstance(err.cause, KeyError)

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestFeatureErrors:
    def test_unknown_feature(self) -> None:
        err = UnknownFeatureError("beta")
        assert isinstance(err, DomainError)
        assert err.code == "unknown_feature"
        assert err.feature == "beta"
        assert err.detail == {"feature": "beta"}

    def test_duplicate_feature(self) -> None:
        err = DuplicateFeatureError("beta")
        assert isinstance(err, DomainError)
        assert err.code == "duplicate_feature"

    def test_conflict(self) -> None:
        ref = FlaggableRef("User", "1")
        err = FeatureFlagConflictError(ref)
        assert isinstance(err, ConflictError)
        assert err.code == "feature_flag_conflict"
        assert err.flaggable is ref
        assert "User#1" in err.message

    def test_transaction_closed(self) -> None:
        err = TransactionClosedError()
        assert isinstance(err, ApplicationError)
        assert err.code == "transaction_closed"

    def test_validation_error_is_domain_error(self) -> None:
        assert issubclass(ValidationError, DomainError)
