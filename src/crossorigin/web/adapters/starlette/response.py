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
"""HeaderCollector — CorsResponse implementation for ASGI responses."""

from __future__ import annotations

from collections.abc import MutableMapping

from starlette.responses import Response


class HeaderCollector:
    """Records the headers and halt status written by the shaper.

    The collected headers are either rendered into a standalone response
    (preflight) or merged into the application's response start message.
    """

    __slots__ = ("headers", "status_code")

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.status_code: int | None = None

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def halt(self, status_code: int) -> None:
        self.status_code = status_code

    @property
    def halted(self) -> bool:
        return self.status_code is not None

    def apply_to(self, headers: MutableMapping[str, str]) -> None:
        """Copy the collected headers onto *headers*, overwriting same-named ones."""
        for name, value in self.headers.items():
            headers[name] = value

    def to_response(self) -> Response:
        """Render the halted exchange as an empty-bodied response."""
        if self.status_code is None:
            raise RuntimeError("to_response() called on an exchange that was not halted")
        return Response(content=b"", status_code=self.status_code, headers=self.headers)
