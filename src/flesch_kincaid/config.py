from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class KincaidConfig:
    """Configuration options for scoring runs and report output."""

    decimals: int = 2
    include_descriptions: bool = True
    aggregate: bool = True
    input_extensions: List[str] = field(default_factory=lambda: [".txt", ".md"])
    encoding: str = "utf-8"

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {item.name for item in fields(KincaidConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "input_extensions" in kwargs:
        kwargs["input_extensions"] = _normalize_extensions(kwargs["input_extensions"])
    return kwargs


def _normalize_extensions(value: Any) -> List[str]:
    if isinstance(value, str):
        value = [value]
    extensions: List[str] = []
    for item in value:
        ext = str(item).strip().lower()
        if ext and not ext.startswith("."):
            ext = f".{ext}"
        if ext:
            extensions.append(ext)
    return extensions


def config_from_dict(data: Mapping[str, Any] | None) -> KincaidConfig:
    """Build a KincaidConfig from a dictionary-like input."""
    if data is None:
        return KincaidConfig()
    return KincaidConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> KincaidConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> KincaidConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return KincaidConfig()
    return config_from_yaml(path)
