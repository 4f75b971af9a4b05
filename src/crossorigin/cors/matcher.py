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
"""Origin allow-list matching."""

from __future__ import annotations

from collections.abc import Iterable

from crossorigin.cors.config import WILDCARD_ALL

_SUBDOMAIN_PREFIX = "*."


def origin_matches(origin: str, patterns: str | Iterable[str]) -> bool:
    """Return ``True`` if *origin* is allowed by *patterns*.

    *patterns* is either :data:`WILDCARD_ALL` or an ordered collection of
    exact origins and ``*.suffix`` patterns. An exact pattern must equal the
    origin byte-for-byte. ``*.example.com`` matches ``example.com`` itself and
    any subdomain at any depth, but never ``otherexample.com``.

    Comparison is case-sensitive and nothing is normalized; configured
    strings are compared verbatim against the header value.
    """
    if patterns == WILDCARD_ALL:
        return True
    if isinstance(patterns, str):
        patterns = (patterns,)

    for pattern in patterns:
        if pattern.startswith(_SUBDOMAIN_PREFIX):
            suffix = pattern[len(_SUBDOMAIN_PREFIX):]
            if origin == suffix or origin.endswith("." + suffix):
                return True
        elif origin == pattern:
            return True
    return False
