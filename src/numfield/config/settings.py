"""NumfieldSettings: CLI flags, env vars and numfield.toml merged into one object.

Highest priority first:

1. keyword arguments (the CLI flags actually given)
2. ``NUMFIELD_*`` env vars; nested keys use ``__``
   (``NUMFIELD_FIELD__DECIMAL_SEPARATOR=,``)
3. ``numfield.toml`` (see :mod:`numfield.config.discovery`)
4. defaults baked into :class:`~numfield.config.models.FieldConfig`

Nested tables are deep-merged, so ``--max-decimals 4`` on the command line
keeps a ``decimal_separator`` set in the TOML file.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from numfield.config.discovery import find_config
from numfield.config.models import FieldConfig


def _load_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as fh:
        try:
            return tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise click.ClickException(msg) from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one parsed numfield.toml (or nothing)."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = _load_toml(toml_path) if toml_path and toml_path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# settings_customise_sources is a classmethod with no access to init
# kwargs, so from_cli hands the resolved TOML path over through here.
_pending = threading.local()


class NumfieldSettings(BaseSettings):
    """Everything one CLI invocation needs to know.

    Attributes:
        config_path: The TOML file that was read, or None.
        json_output: ``--json``.
        quiet: ``-q``; print bare values.
        verbose: ``-v``; debug logs and telemetry spans.
        log_json: ``--log-json``; JSON log lines on stderr.
        field: The ``[field]`` policy, validated when the service is built.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "NUMFIELD_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    field: FieldConfig = Field(default_factory=FieldConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlSettingsSource(settings_cls, getattr(_pending, "toml_path", None))
        return init_settings, env_settings, toml

    @staticmethod
    def _resolve_toml(config_path: str | None, start: Path | None) -> Path | None:
        if not config_path:
            return find_config(start)
        explicit = Path(config_path)
        return explicit if explicit.is_file() else None

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        field_overrides: dict[str, Any] | None = None,
        **cli_flags: Any,
    ) -> NumfieldSettings:
        """Build settings for one invocation.

        *config_path* (``--config``) bypasses discovery; a missing file
        there means "no TOML", not an error. ``None`` entries in
        *field_overrides* are flags the user did not pass and are dropped.
        """
        toml_path = cls._resolve_toml(config_path, start)
        given = {k: v for k, v in (field_overrides or {}).items() if v is not None}
        if given:
            cli_flags["field"] = given

        _pending.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _pending.toml_path = None
