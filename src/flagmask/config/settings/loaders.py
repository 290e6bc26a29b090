"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import dataclasses
import os
import typing
from typing import Any, TypeVar

from flagmask.kernel.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T")


def parse_int(value: str) -> int:
    """Parse an integer setting.

    ``0b``/``0o``/``0x`` prefixes are honoured so state words can be written
    in binary; anything else is read as base 10, leading zeros included
    (``"010"`` is ten).
    """
    text = value.strip()
    try:
        return int(text, 0)
    except ValueError:
        return int(text, 10)


class EnvSettingsLoader:
    """Populate a settings dataclass from ``<PREFIX>_<FIELD>`` variables.

    The prefix is read from the dataclass's ``_prefix`` class attribute.
    ``environ`` defaults to :data:`os.environ`; pass a plain mapping in tests.
    """

    def __init__(self, environ: typing.Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        hints = typing.get_type_hints(settings_class)
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            try:
                kwargs[field.name] = self._coerce(raw, hints.get(field.name, str))
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", settings=settings_class.__name__) from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:
        if type_hint is bool:
            return value.strip().lower() in ("1", "true", "yes", "on")
        if type_hint is int:
            return parse_int(value)
        if type_hint is float:
            return float(value)
        if typing.get_origin(type_hint) is list:
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


__all__ = ["EnvSettingsLoader", "parse_int"]
