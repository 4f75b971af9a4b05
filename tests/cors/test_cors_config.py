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
"""Tests for CORSConfig and resolve_cors_config."""

import dataclasses
from pathlib import Path

import pytest

from crossorigin.core.config import Config
from crossorigin.cors.config import DEFAULT_METHODS, WILDCARD_ALL, CORSConfig, resolve_cors_config


class TestCORSConfigDefaults:
    def test_defaults(self):
        cfg = CORSConfig()

        assert cfg.origins == WILDCARD_ALL
        assert cfg.methods == ("GET", "HEAD", "POST", "OPTIONS", "PUT", "PATCH", "DELETE")
        assert cfg.headers == ()
        assert cfg.expose_headers == ()
        assert cfg.max_age == 0
        assert cfg.supports_credentials is False
        assert cfg.debug is False
        assert cfg.allows_all_origins is True

    def test_frozen(self):
        cfg = CORSConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.max_age = 9999  # type: ignore[misc]


class TestResolveBuiltInDefaults:
    def test_bundled_defaults_match_dataclass_defaults(self):
        assert resolve_cors_config() == CORSConfig()

    def test_empty_settings_fall_back_to_dataclass_defaults(self):
        assert resolve_cors_config(settings=Config({})) == CORSConfig()


class TestResolvePrecedence:
    def test_options_override_settings(self):
        settings = Config({"crossorigin": {"cors": {"max_age": 100, "methods": ["GET"]}}})
        cfg = resolve_cors_config({"max_age": 600}, settings)

        assert cfg.max_age == 600
        assert cfg.methods == ("GET",)

    def test_settings_override_defaults(self):
        settings = Config(
            {
                "crossorigin": {
                    "cors": {
                        "origins": ["test.origin.test", "*.domain.com"],
                        "supports_credentials": True,
                    }
                }
            }
        )
        cfg = resolve_cors_config(settings=settings)

        assert cfg.origins == ("test.origin.test", "*.domain.com")
        assert cfg.supports_credentials is True
        assert cfg.methods == DEFAULT_METHODS

    def test_env_var_overrides_settings(self, monkeypatch):
        monkeypatch.setenv("CROSSORIGIN_CORS_ORIGINS", "a.com, *.b.com")
        monkeypatch.setenv("CROSSORIGIN_CORS_MAX_AGE", "300")
        monkeypatch.setenv("CROSSORIGIN_CORS_SUPPORTS_CREDENTIALS", "true")
        cfg = resolve_cors_config(settings=Config({}))

        assert cfg.origins == ("a.com", "*.b.com")
        assert cfg.max_age == 300
        assert cfg.supports_credentials is True

    def test_options_override_env_var(self, monkeypatch):
        monkeypatch.setenv("CROSSORIGIN_CORS_MAX_AGE", "300")
        assert resolve_cors_config({"max_age": 5}, Config({})).max_age == 5

    def test_settings_from_file(self, tmp_path: Path):
        (tmp_path / "crossorigin.yaml").write_text(
            "crossorigin:\n  cors:\n    headers: [Authorization, X-Api-Key]\n    debug: true\n"
        )
        cfg = resolve_cors_config(settings=Config.from_sources(tmp_path))

        assert cfg.headers == ("Authorization", "X-Api-Key")
        assert cfg.debug is True
        assert cfg.origins == WILDCARD_ALL


class TestResolveCoercion:
    def test_lists_become_tuples(self):
        cfg = resolve_cors_config({"methods": ["GET", "POST"], "expose_headers": ["X-A"]})
        assert cfg.methods == ("GET", "POST")
        assert cfg.expose_headers == ("X-A",)

    def test_wildcard_string(self):
        assert resolve_cors_config({"origins": " * "}).origins == WILDCARD_ALL

    def test_single_origin_string(self):
        assert resolve_cors_config({"origins": "http://a.com"}).origins == ("http://a.com",)

    def test_none_list_is_empty(self):
        assert resolve_cors_config({"headers": None}).headers == ()

    @pytest.mark.parametrize("value,expected", [("yes", True), ("1", True), ("no", False), (0, False)])
    def test_bool_strings(self, value, expected):
        assert resolve_cors_config({"supports_credentials": value}).supports_credentials is expected

    def test_max_age_string(self):
        assert resolve_cors_config({"max_age": "600"}).max_age == 600


class TestResolveErrors:
    def test_unknown_option(self):
        with pytest.raises(ValueError, match="Unknown CORS option"):
            resolve_cors_config({"allow_origins": ["a.com"]})

    def test_negative_max_age(self):
        with pytest.raises(ValueError, match="non-negative"):
            resolve_cors_config({"max_age": -1})

    def test_non_integer_max_age(self):
        with pytest.raises(ValueError, match="integer"):
            resolve_cors_config({"max_age": "ten minutes"})

    def test_bool_max_age(self):
        with pytest.raises(ValueError, match="integer"):
            resolve_cors_config({"max_age": True})

    def test_wildcard_mixed_into_list(self):
        with pytest.raises(ValueError, match="origins"):
            resolve_cors_config({"origins": ["*", "a.com"]})

    def test_non_iterable_names(self):
        with pytest.raises(ValueError, match="methods"):
            resolve_cors_config({"methods": 42})
