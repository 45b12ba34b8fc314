"""Configuration model and loaders for kdocfmt.

Responsibilities:
- Define run configuration as a typed dataclass.
- Provide deterministic precedence resolution for the maximum line width.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `KdocfmtConfig`: normalized settings for a formatting run.
- `RuntimeConfigSources`: optional value sources for precedence resolution.
- `ConfigLoader`: static construction helpers for `KdocfmtConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .kdoc.writer import MAX_LINE_WIDTH
from .parsing import normalize_optional_string, parse_csv_list, parse_positive_int

_DEFAULT_EXTENSIONS = (".kt", ".kts")
# `/**  */` must fit with at least one column of content.
_MIN_LINE_WIDTH = len("/**  */") + 1


@dataclass(frozen=True, slots=True)
class RuntimeConfigSources:
    """Source mappings used for deterministic runtime value precedence.

    Attributes:
        cli: Values explicitly provided by CLI arguments.
        env: Values loaded from environment variables.
    """

    cli: Mapping[str, str] = field(default_factory=dict)
    env: Mapping[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class KdocfmtConfig:
    """Configuration for one formatting run.

    Attributes:
        max_line_width: Maximum output line width, indentation included.
        extensions: File suffixes searched for when a directory is given.
        exclude: Glob patterns matched against POSIX paths of skipped files.
        runtime_sources: Optional runtime source overrides injected by CLI.
    """

    max_line_width: int = MAX_LINE_WIDTH
    extensions: tuple[str, ...] = _DEFAULT_EXTENSIONS
    exclude: tuple[str, ...] = ()
    runtime_sources: RuntimeConfigSources = field(default_factory=RuntimeConfigSources)

    def validate(self) -> None:
        """Validate configuration values before a run."""

        self._validate_line_width(self.max_line_width)
        if not self.extensions:
            raise ValueError("`extensions` must list at least one file suffix.")
        for extension in self.extensions:
            if not extension.startswith(".") or len(extension) < 2:
                raise ValueError(
                    f"`extensions` entries must look like `.kt`; got `{extension}`."
                )

    def resolved_max_line_width(self, sources: RuntimeConfigSources | None = None) -> int:
        """Resolve the maximum line width with deterministic source precedence.

        Precedence is `cli` > `env` > config field.
        """

        resolved_sources = sources if sources is not None else RuntimeConfigSources()

        cli_value = self._normalized_lookup(resolved_sources.cli, "max_line_width")
        if cli_value is not None:
            width = parse_positive_int(cli_value, "max_line_width")
        else:
            env_value = self._normalized_lookup(resolved_sources.env, "KDOCFMT_MAX_LINE_WIDTH")
            if env_value is not None:
                width = parse_positive_int(env_value, "KDOCFMT_MAX_LINE_WIDTH")
            else:
                width = self.max_line_width
        self._validate_line_width(width)
        return width

    @staticmethod
    def _normalized_lookup(mapping: Mapping[str, str], key: str) -> str | None:
        """Return a stripped mapping value for a key or `None` when missing/blank."""

        if key not in mapping:
            return None
        return normalize_optional_string(mapping.get(key))

    @staticmethod
    def _validate_line_width(width: int) -> None:
        """Validate that a line width leaves room for a one-line comment."""

        if width < _MIN_LINE_WIDTH:
            raise ValueError(f"`max_line_width` must be at least {_MIN_LINE_WIDTH}.")


class ConfigLoader:
    """Factory methods for creating `KdocfmtConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"max_line_width", "extensions", "exclude"})
    _RUNTIME_ENV_KEYS = frozenset({"KDOCFMT_MAX_LINE_WIDTH"})

    @staticmethod
    def from_yaml(path: Path) -> KdocfmtConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> KdocfmtConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        max_line_width = MAX_LINE_WIDTH
        raw_width = normalize_optional_string(env_map.get("KDOCFMT_MAX_LINE_WIDTH"))
        if raw_width is not None:
            max_line_width = parse_positive_int(raw_width, "KDOCFMT_MAX_LINE_WIDTH")
        extensions = ConfigLoader._normalize_extensions(
            parse_csv_list(env_map.get("KDOCFMT_EXTENSIONS"))
        ) or _DEFAULT_EXTENSIONS
        exclude = parse_csv_list(env_map.get("KDOCFMT_EXCLUDE"))

        runtime_env = {
            key: value
            for key, value in env_map.items()
            if key in ConfigLoader._RUNTIME_ENV_KEYS
            and normalize_optional_string(value) is not None
        }

        config = KdocfmtConfig(
            max_line_width=max_line_width,
            extensions=extensions,
            exclude=exclude,
            runtime_sources=RuntimeConfigSources(env=runtime_env),
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> KdocfmtConfig:
        """Build a validated config from a normalized mapping payload."""

        ConfigLoader._validate_yaml_keys(payload, source_label)

        max_line_width = MAX_LINE_WIDTH
        if payload.get("max_line_width") is not None:
            max_line_width = parse_positive_int(payload["max_line_width"], "max_line_width")
        extensions = ConfigLoader._normalize_extensions(
            ConfigLoader._optional_string_list(payload, "extensions", source_label)
        ) or _DEFAULT_EXTENSIONS
        exclude = ConfigLoader._optional_string_list(payload, "exclude", source_label)

        config = KdocfmtConfig(
            max_line_width=max_line_width,
            extensions=extensions,
            exclude=exclude,
        )
        config.validate()
        return config

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject unknown keys so typos do not silently fall back to defaults."""

        unknown = sorted(str(key) for key in payload if key not in ConfigLoader._SUPPORTED_YAML_KEYS)
        if unknown:
            raise ValueError(f"{source_label} has unsupported keys: {', '.join(unknown)}.")

    @staticmethod
    def _optional_string_list(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> tuple[str, ...]:
        """Read a list of strings, or a comma-separated string, from the payload."""

        value = payload.get(key)
        if value is None:
            return ()
        if isinstance(value, str):
            return parse_csv_list(value)
        if not isinstance(value, list):
            raise ValueError(f"{source_label} field `{key}` must be a list of strings.")
        items = (normalize_optional_string(item) for item in value)
        return tuple(item for item in items if item is not None)

    @staticmethod
    def _normalize_extensions(extensions: tuple[str, ...]) -> tuple[str, ...]:
        """Prefix bare suffixes such as `kt` with a dot."""

        return tuple(
            extension if extension.startswith(".") else f".{extension}"
            for extension in extensions
        )
