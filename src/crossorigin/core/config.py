# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Process-wide configuration from YAML/TOML files, env vars, and bundled defaults."""

from __future__ import annotations

import importlib.resources
import os
import tomllib
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

ENV_PREFIX = "CROSSORIGIN_"


class Config:
    """Hierarchical configuration with dot-notation access and env var overrides.

    Priority (highest wins):
    1. Environment variables (CROSSORIGIN_SECTION_KEY format)
    2. Configuration dict / YAML / TOML file values
    3. Bundled defaults (crossorigin-defaults.yaml)
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._loaded_sources: list[str] = []

    @property
    def loaded_sources(self) -> list[str]:
        """List of config file paths that were loaded, in merge order."""
        return list(self._loaded_sources)

    @classmethod
    def defaults(cls) -> Config:
        """Config holding only the bundled defaults."""
        instance = cls(cls._load_framework_defaults())
        instance._loaded_sources = ["crossorigin-defaults.yaml (defaults)"]
        return instance

    @classmethod
    def from_sources(
        cls,
        base_dir: str | Path,
        active_profiles: list[str] | None = None,
        load_defaults: bool = True,
    ) -> Config:
        """Load and merge config from multiple sources.

        Merge order (later wins):
        1. Bundled defaults (crossorigin-defaults.yaml from package)
        2. config/crossorigin.yaml or config/crossorigin.toml
        3. crossorigin.yaml or crossorigin.toml (base_dir root)
        4. Profile overlays: config/crossorigin-{profile}.*, crossorigin-{profile}.*
        5. Environment variables (handled at read time in get())
        """
        base_dir = Path(base_dir)
        data: dict[str, Any] = {}
        sources: list[str] = []

        if load_defaults:
            data = cls._load_framework_defaults()
            sources.append("crossorigin-defaults.yaml (defaults)")

        candidates: list[tuple[Path, str | None]] = []
        for search_dir in (base_dir / "config", base_dir):
            for ext in (".yaml", ".toml"):
                candidates.append((search_dir / f"crossorigin{ext}", None))
        for profile in active_profiles or []:
            for search_dir in (base_dir / "config", base_dir):
                for ext in (".yaml", ".toml"):
                    candidates.append((search_dir / f"crossorigin-{profile}{ext}", profile))

        for candidate, profile in candidates:
            if candidate.is_file():
                data = cls._deep_merge(data, cls._load_config_data(candidate))
                sources.append(f"{candidate} (profile: {profile})" if profile else str(candidate))

        instance = cls(data)
        instance._loaded_sources = sources
        return instance

    @classmethod
    def from_file(cls, path: str | Path, load_defaults: bool = True) -> Config:
        """Load a single YAML or TOML file on top of the bundled defaults."""
        path = Path(path)
        data = cls._load_framework_defaults() if load_defaults else {}
        sources = ["crossorigin-defaults.yaml (defaults)"] if load_defaults else []

        if path.exists():
            data = cls._deep_merge(data, cls._load_config_data(path))
            sources.append(str(path))

        instance = cls(data)
        instance._loaded_sources = sources
        return instance

    @staticmethod
    def _load_config_data(path: Path) -> dict[str, Any]:
        """Load config data from a YAML or TOML file."""
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f) or {}
        with open(path) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _load_framework_defaults() -> dict[str, Any]:
        """Load bundled defaults from crossorigin.resources."""
        defaults_file = importlib.resources.files("crossorigin.resources").joinpath(
            "crossorigin-defaults.yaml"
        )
        with importlib.resources.as_file(defaults_file) as p, open(p) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge override into base, with override values winning."""
        merged = dict(base)
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = Config._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key, checking env vars first."""
        # crossorigin.cors.max_age -> CROSSORIGIN_CORS_MAX_AGE
        env_base = key.removeprefix("crossorigin.")
        env_key = ENV_PREFIX + env_base.upper().replace(".", "_").replace("-", "_")
        env_val = os.environ.get(env_key)
        if env_val is not None:
            return env_val

        current: Any = self._data
        for part in key.split("."):
            if isinstance(current, dict):
                current = current.get(part)
                if current is None:
                    return default
            else:
                return default
        return current

    def has(self, key: str) -> bool:
        """Return ``True`` if *key* is set in the data or the environment."""
        sentinel = object()
        return self.get(key, sentinel) is not sentinel

    def get_section(self, prefix: str) -> dict[str, Any]:
        """Get all values under a prefix as a dict."""
        current: Any = self._data
        for part in prefix.split("."):
            if isinstance(current, dict):
                current = current.get(part, {})
            else:
                return {}
        return current if isinstance(current, dict) else {}
