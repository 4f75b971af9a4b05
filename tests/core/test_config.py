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
"""Tests for Config — bundled defaults, file sources, profiles, and env overrides."""

from pathlib import Path

from crossorigin.core.config import Config


class TestBundledDefaults:
    def test_load_defaults_provides_crossorigin_namespace(self):
        defaults = Config._load_framework_defaults()
        assert "crossorigin" in defaults
        assert "cors" in defaults["crossorigin"]

    def test_defaults_have_logging_level(self):
        assert Config.defaults().get("crossorigin.logging.level.root") == "INFO"

    def test_defaults_have_cors_methods(self):
        methods = Config.defaults().get("crossorigin.cors.methods")
        assert methods == ["GET", "HEAD", "POST", "OPTIONS", "PUT", "PATCH", "DELETE"]

    def test_defaults_record_source(self):
        assert Config.defaults().loaded_sources == ["crossorigin-defaults.yaml (defaults)"]


class TestGet:
    def test_dot_notation(self):
        config = Config({"a": {"b": {"c": 1}}})
        assert config.get("a.b.c") == 1

    def test_missing_returns_default(self):
        assert Config({}).get("a.b", "fallback") == "fallback"

    def test_non_dict_intermediate_returns_default(self):
        assert Config({"a": 5}).get("a.b", "x") == "x"

    def test_falsy_values_are_returned(self):
        config = Config({"crossorigin": {"cors": {"max_age": 0, "debug": False}}})
        assert config.get("crossorigin.cors.max_age", 99) == 0
        assert config.get("crossorigin.cors.debug", True) is False

    def test_env_var_wins(self, monkeypatch):
        monkeypatch.setenv("CROSSORIGIN_CORS_MAX_AGE", "42")
        config = Config({"crossorigin": {"cors": {"max_age": 0}}})
        assert config.get("crossorigin.cors.max_age") == "42"

    def test_env_var_for_unprefixed_key(self, monkeypatch):
        monkeypatch.setenv("CROSSORIGIN_APP_NAME", "env-app")
        assert Config({}).get("app.name") == "env-app"


class TestHas:
    def test_present_key(self):
        assert Config({"a": {"b": False}}).has("a.b") is True

    def test_absent_key(self):
        assert Config({}).has("a.b") is False

    def test_env_only_key(self, monkeypatch):
        monkeypatch.setenv("CROSSORIGIN_CORS_ORIGINS", "*")
        assert Config({}).has("crossorigin.cors.origins") is True


class TestGetSection:
    def test_section(self):
        config = Config({"crossorigin": {"logging": {"level": {"root": "DEBUG"}}}})
        assert config.get_section("crossorigin.logging.level") == {"root": "DEBUG"}

    def test_missing_section(self):
        assert Config({}).get_section("x.y") == {}


class TestFromSources:
    def test_yaml_root_file(self, tmp_path: Path):
        (tmp_path / "crossorigin.yaml").write_text("crossorigin:\n  cors:\n    max_age: 600\n")
        config = Config.from_sources(tmp_path)
        assert config.get("crossorigin.cors.max_age") == 600
        # bundled defaults still present
        assert config.get("crossorigin.cors.supports_credentials") is False

    def test_root_overrides_config_dir(self, tmp_path: Path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "crossorigin.yaml").write_text("crossorigin:\n  cors:\n    max_age: 1\n")
        (tmp_path / "crossorigin.yaml").write_text("crossorigin:\n  cors:\n    max_age: 2\n")
        assert Config.from_sources(tmp_path).get("crossorigin.cors.max_age") == 2

    def test_toml_file(self, tmp_path: Path):
        (tmp_path / "crossorigin.toml").write_text(
            '[crossorigin.cors]\norigins = ["a.com", "*.b.com"]\nsupports_credentials = true\n'
        )
        config = Config.from_sources(tmp_path, load_defaults=False)
        assert config.get("crossorigin.cors.origins") == ["a.com", "*.b.com"]
        assert config.get("crossorigin.cors.supports_credentials") is True
        assert config.get("crossorigin.cors.methods") is None

    def test_profile_overlay(self, tmp_path: Path):
        (tmp_path / "crossorigin.yaml").write_text("crossorigin:\n  cors:\n    debug: false\n")
        (tmp_path / "crossorigin-dev.yaml").write_text("crossorigin:\n  cors:\n    debug: true\n")
        config = Config.from_sources(tmp_path, active_profiles=["dev"])
        assert config.get("crossorigin.cors.debug") is True
        assert any("profile: dev" in s for s in config.loaded_sources)

    def test_deep_merge_keeps_siblings(self, tmp_path: Path):
        (tmp_path / "crossorigin.yaml").write_text("crossorigin:\n  logging:\n    format: json\n")
        config = Config.from_sources(tmp_path)
        assert config.get("crossorigin.logging.format") == "json"
        assert config.get("crossorigin.logging.level.root") == "INFO"


class TestFromFile:
    def test_arbitrary_file_name(self, tmp_path: Path):
        path = tmp_path / "cors-settings.yaml"
        path.write_text("crossorigin:\n  cors:\n    headers: [X-Custom]\n")
        config = Config.from_file(path)
        assert config.get("crossorigin.cors.headers") == ["X-Custom"]
        assert config.loaded_sources[-1] == str(path)

    def test_missing_file_returns_defaults_only(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "nonexistent.yaml")
        assert config.get("crossorigin.cors.origins") == "*"

    def test_without_defaults(self, tmp_path: Path):
        path = tmp_path / "c.yaml"
        path.write_text("app:\n  name: test\n")
        config = Config.from_file(path, load_defaults=False)
        assert config.get("crossorigin.cors.origins") is None
        assert config.get("app.name") == "test"
