from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


DEFAULTS: Dict[str, Any] = {
    "updater": {
        "root": "pkg",
        "manifest": "package.json",
        "name": "mtml-parser",
        "extensions": [".wasm", ".js", ".ts"],
        "posix_paths": False,
    }
}


def load_yaml(path: str | Path) -> Dict[str, Any]:
    """Load YAML config into a dict. An empty file yields an empty dict."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}.")
    return data


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@dataclass
class AppConfig:
    raw: Dict[str, Any]

    @classmethod
    def from_files(cls, *paths: str | Path) -> "AppConfig":
        merged: Dict[str, Any] = deep_merge({}, DEFAULTS)
        for path in paths:
            merged = deep_merge(merged, load_yaml(path))
        return cls(raw=merged)

    def with_overrides(self, override: Dict[str, Any]) -> "AppConfig":
        return AppConfig(raw=deep_merge(self.raw, override))


@dataclass
class UpdaterConfig:
    root: str = "pkg"
    manifest: str = "package.json"
    name: str = "mtml-parser"
    extensions: List[str] = field(default_factory=lambda: [".wasm", ".js", ".ts"])
    posix_paths: bool = False

    @property
    def manifest_path(self) -> str:
        return os.path.join(self.root, self.manifest)

    @classmethod
    def from_app_config(cls, cfg: Optional[AppConfig] = None) -> "UpdaterConfig":
        raw = cfg.raw if cfg is not None else DEFAULTS
        updater = raw.get("updater") or {}
        if not isinstance(updater, dict):
            raise ValueError(f"Config section 'updater' must be a mapping, got {type(updater).__name__}.")
        section = deep_merge(DEFAULTS["updater"], updater)

        extensions = section["extensions"]
        if isinstance(extensions, str):
            extensions = [extensions]
        if not isinstance(extensions, list):
            raise ValueError(f"Config key 'updater.extensions' must be a list, got {type(extensions).__name__}.")
        for ext in extensions:
            if not str(ext).startswith("."):
                raise ValueError(f"Extension {ext!r} must include the leading dot.")

        return cls(
            root=str(section["root"]),
            manifest=str(section["manifest"]),
            name=str(section["name"]),
            extensions=[str(ext) for ext in extensions],
            posix_paths=bool(section["posix_paths"]),
        )
