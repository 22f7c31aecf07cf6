"""Utf8Settings: CLI flags, ``UTF8CTL_*`` env vars and ``utf8ctl.toml``.

Later sources only fill what earlier ones left unset::

    CLI flags  >  UTF8CTL_* env  >  utf8ctl.toml  >  model defaults

Nested sections use ``__`` in env var names, e.g.
``UTF8CTL_CODEC__POLICY=lenient``.
"""

from __future__ import annotations

import threading
import tomllib
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from utf8ctl.config.discovery import find_config
from utf8ctl.config.models import CodecConfig, OutputConfig


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*, reporting syntax errors as a ClickException."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one TOML file (or nothing)."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._values = read_toml(path) if path is not None and path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, field_name in self._values

    def __call__(self) -> dict[str, Any]:
        return self._values


# pydantic-settings builds sources inside __init__, so the chosen file is
# parked here for the duration of the constructor call.
_pending = threading.local()


@contextmanager
def _toml_file(path: Path | None) -> Iterator[None]:
    _pending.path = path
    try:
        yield
    finally:
        _pending.path = None


class Utf8Settings(BaseSettings):
    """Resolved settings shared by the CLI and CodecService."""

    model_config = {
        "frozen": True,
        "env_prefix": "UTF8CTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    codec: CodecConfig = Field(default_factory=CodecConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlSettingsSource(settings_cls, getattr(_pending, "path", None))
        return init_settings, env_settings, toml

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> Utf8Settings:
        """Build settings for one invocation.

        An explicit *config_path* that does not exist means "no file";
        otherwise ``utf8ctl.toml`` is looked up from *start* (default: cwd).
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(start)

        with _toml_file(toml_path):
            return cls(config_path=toml_path, **cli_flags)
