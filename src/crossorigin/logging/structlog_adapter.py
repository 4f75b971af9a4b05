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
"""StructlogAdapter — default LoggingPort implementation using structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from crossorigin.core.config import Config

CORS_LOGGER = "crossorigin.cors"


class StructlogAdapter:
    """Logging adapter backed by structlog.

    Settings read from *config*:

    - ``crossorigin.logging.level``: ``root`` plus per-logger overrides
    - ``crossorigin.logging.format``: ``console`` or ``json``
    - ``crossorigin.cors.debug``: when true, the ``crossorigin.cors`` logger
      drops to DEBUG so tracer events are emitted, unless a level for it is
      configured explicitly
    """

    def __init__(self) -> None:
        self._root_level: str = "INFO"
        self._format: str = "console"
        self._module_levels: dict[str, str] = {}

    @property
    def format(self) -> str:
        return self._format

    @property
    def levels(self) -> dict[str, str]:
        """Root and per-logger levels applied by the last :meth:`configure`."""
        return {"root": self._root_level, **self._module_levels}

    def configure(self, config: Config) -> None:
        level_section = dict(config.get_section("crossorigin.logging.level"))
        self._root_level = str(level_section.pop("root", "INFO")).upper()
        self._module_levels = {name: str(level).upper() for name, level in level_section.items()}
        self._format = str(config.get("crossorigin.logging.format", "console")).lower()

        debug = config.get("crossorigin.cors.debug", False)
        if isinstance(debug, str):
            debug = debug.strip().lower() in ("true", "1", "yes")
        if debug:
            self._module_levels.setdefault(CORS_LOGGER, "DEBUG")

        structlog.configure(
            processors=self._processors(),
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=getattr(logging, self._root_level, logging.INFO),
            force=True,
        )
        for name, level in self._module_levels.items():
            self.set_level(name, level)

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set the level of the stdlib logger behind *name*."""
        logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))

    def _processors(self) -> list[structlog.types.Processor]:
        processors: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ]
        renderer: structlog.types.Processor = (
            structlog.processors.JSONRenderer()
            if self._format == "json"
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        processors.append(renderer)
        return processors
