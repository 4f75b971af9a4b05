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
"""CORS configuration and the two-tier resolver.

A :class:`CORSConfig` is resolved once per middleware instance (one per mount
point) and never changes afterwards. Call-site options win over the
process-wide :class:`~crossorigin.core.config.Config`, which in turn wins over
the built-in defaults below.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from crossorigin.core.config import Config

WILDCARD_ALL = "*"

DEFAULT_METHODS: tuple[str, ...] = ("GET", "HEAD", "POST", "OPTIONS", "PUT", "PATCH", "DELETE")

CONFIG_PREFIX = "crossorigin.cors"


@dataclass(frozen=True)
class CORSConfig:
    """Resolved Cross-Origin Resource Sharing policy.

    ``origins`` is either :data:`WILDCARD_ALL` or a tuple of patterns, each an
    exact origin string or a ``*.example.com`` wildcard-subdomain pattern.
    ``headers`` are the *additional* allowed request headers; the baseline set
    is merged in when the preflight response is built.
    """

    origins: str | tuple[str, ...] = WILDCARD_ALL
    methods: tuple[str, ...] = DEFAULT_METHODS
    headers: tuple[str, ...] = ()
    expose_headers: tuple[str, ...] = ()
    max_age: int = 0
    supports_credentials: bool = False
    debug: bool = field(default=False, compare=False)

    @property
    def allows_all_origins(self) -> bool:
        return self.origins == WILDCARD_ALL


_FIELD_NAMES = tuple(f.name for f in dataclasses.fields(CORSConfig))


def resolve_cors_config(
    options: Mapping[str, Any] | None = None,
    settings: Config | None = None,
) -> CORSConfig:
    """Merge call-site *options* over process-wide *settings* into a CORSConfig.

    Each key is looked up in *options* first, then under ``crossorigin.cors``
    in *settings* (env vars included), then falls back to the dataclass
    default. When *settings* is omitted the bundled defaults are used.

    Raises:
        ValueError: for unknown option names or values that cannot be coerced.
    """
    options = dict(options or {})
    unknown = sorted(set(options) - set(_FIELD_NAMES))
    if unknown:
        raise ValueError(f"Unknown CORS option(s): {', '.join(unknown)}")

    settings = settings if settings is not None else Config.defaults()

    raw: dict[str, Any] = {}
    for name in _FIELD_NAMES:
        if name in options:
            raw[name] = options[name]
        elif settings.has(f"{CONFIG_PREFIX}.{name}"):
            raw[name] = settings.get(f"{CONFIG_PREFIX}.{name}")

    return CORSConfig(
        origins=_coerce_origins(raw.get("origins", WILDCARD_ALL)),
        methods=_coerce_names(raw.get("methods", DEFAULT_METHODS), "methods"),
        headers=_coerce_names(raw.get("headers", ()), "headers"),
        expose_headers=_coerce_names(raw.get("expose_headers", ()), "expose_headers"),
        max_age=_coerce_max_age(raw.get("max_age", 0)),
        supports_credentials=_coerce_bool(raw.get("supports_credentials", False)),
        debug=_coerce_bool(raw.get("debug", False)),
    )


def _coerce_names(value: Any, name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    try:
        return tuple(str(item) for item in value)
    except TypeError:
        raise ValueError(f"CORS option '{name}' must be a list of strings, got {value!r}") from None


def _coerce_origins(value: Any) -> str | tuple[str, ...]:
    if isinstance(value, str) and value.strip() == WILDCARD_ALL:
        return WILDCARD_ALL
    origins = _coerce_names(value, "origins")
    if WILDCARD_ALL in origins:
        raise ValueError("CORS option 'origins' must be '*' or a list of patterns, not both")
    return origins


def _coerce_max_age(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"CORS option 'max_age' must be an integer, got {value!r}")
    try:
        max_age = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"CORS option 'max_age' must be an integer, got {value!r}") from None
    if max_age < 0:
        raise ValueError(f"CORS option 'max_age' must be non-negative, got {max_age}")
    return max_age


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)
