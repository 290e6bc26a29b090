"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import pytest

from flagmask.kernel.errors import (
    ConfigError,
    DomainError,
    FlagmaskError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


class TestFlagmaskError:
    def test_message_is_stored(self) -> None:
        assert FlagmaskError("something went wrong").message == "something went wrong"

    def test_default_code(self) -> None:
        assert FlagmaskError("m").code == "flagmask_error"

    def test_custom_code(self) -> None:
        assert FlagmaskError("m", code="custom").code == "custom"

    def test_detail_from_keywords(self) -> None:
        assert FlagmaskError("m", label="beta", state=3).detail == {"label": "beta", "state": 3}

    def test_to_dict_is_flat(self) -> None:
        err = FlagmaskError("m", code="my_code", label="beta")
        assert err.to_dict() == {"error": "FlagmaskError", "code": "my_code", "message": "m", "label": "beta"}

    def test_str_prefixes_code(self) -> None:
        assert str(FlagmaskError("oops", code="bad")) == "[bad] oops"

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(FlagmaskError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r


class TestHierarchy:
    def test_domain_and_config_share_root(self) -> None:
        assert issubclass(DomainError, FlagmaskError)
        assert issubclass(ConfigError, FlagmaskError)
        assert not issubclass(ConfigError, DomainError)

    def test_missing_setting(self) -> None:
        err = MissingRequiredSettingError("FLAGMASK_LABELS")
        assert err.setting_name == "FLAGMASK_LABELS"
        assert err.to_dict()["setting"] == "FLAGMASK_LABELS"
        with pytest.raises(ConfigError):
            raise err

    def test_invalid_setting_carries_value(self) -> None:
        err = InvalidSettingValueError("labels", 40, "too many")
        assert err.value == 40
        assert err.reason == "too many"
        assert err.to_dict()["value"] == 40
        assert "labels" in err.message
