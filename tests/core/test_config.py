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
"""Tests for configuration system."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from kvsession.config.properties.session import SessionStoreProperties
from kvsession.core.config import Config, config_properties


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"kvsession": {"session": {"prefix": "app:", "port": 6380}}})
        assert config.get("kvsession.session.prefix") == "app:"
        assert config.get("kvsession.session.port") == 6380

    def test_get_with_default(self):
        config = Config({})
        assert config.get("missing.key", "default") == "default"

    def test_get_section(self):
        config = Config({"kvsession": {"logging": {"level": {"root": "DEBUG"}}}})
        assert config.get_section("kvsession.logging.level") == {"root": "DEBUG"}
        assert config.get_section("kvsession.nothing") == {}

    def test_packaged_defaults(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.get("kvsession.session.prefix") == "sess:"
        assert config.get("kvsession.session.port") == 6379

    def test_load_from_yaml_file(self, tmp_path: Path):
        config_file = tmp_path / "store.yaml"
        config_file.write_text("kvsession:\n  session:\n    host: redis.internal\n")
        config = Config.from_file(config_file)
        assert config.get("kvsession.session.host") == "redis.internal"
        assert config.get("kvsession.session.prefix") == "sess:"

    def test_load_from_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "store.toml"
        config_file.write_text('[kvsession.session]\nprefix = "web:"\nttl = 60\n')
        config = Config.from_file(config_file, load_defaults=False)
        assert config.get("kvsession.session.prefix") == "web:"
        assert config.get("kvsession.session.ttl") == 60

    def test_from_sources_merges_profiles(self, tmp_path: Path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "kvsession.yaml").write_text("kvsession:\n  session:\n    db: 2\n")
        (tmp_path / "kvsession-prod.yaml").write_text("kvsession:\n  session:\n    db: 5\n")
        config = Config.from_sources(tmp_path, active_profiles=["prod"])
        assert config.get("kvsession.session.db") == 5
        assert len(config.loaded_sources) == 3

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("KVSESSION_SESSION_HOST", "env-host")
        config = Config({"kvsession": {"session": {"host": "file-host"}}})
        assert config.get("kvsession.session.host") == "env-host"

    def test_placeholder_with_default(self):
        config = Config({"kvsession": {"session": {"password": "${KVSESSION_TEST_UNSET_PASSWORD:secret}"}}})
        assert config.get("kvsession.session.password") == "secret"

    def test_unresolvable_placeholder_raises(self):
        config = Config({"kvsession": {"session": {"password": "${KVSESSION_TEST_UNSET_PASSWORD}"}}})
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            config.get("kvsession.session.password")


class TestConfigProperties:
    def test_bind_to_dataclass(self):
        @config_properties(prefix="database")
        @dataclass
        class DatabaseConfig:
            url: str = "redis://localhost"
            pool_size: int = 5

        config = Config({"database": {"url": "redis://cache", "pool_size": 20}})
        db_config = config.bind(DatabaseConfig)
        assert db_config.url == "redis://cache"
        assert db_config.pool_size == 20

    def test_bind_uses_defaults(self):
        props = Config({}).bind(SessionStoreProperties)
        assert props.prefix == "sess:"
        assert props.ttl is None
        assert props.db == 0

    def test_bind_coerces_env_strings(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("KVSESSION_SESSION_TTL", "60")
        monkeypatch.setenv("KVSESSION_SESSION_DB", "3")
        props = Config({}).bind(SessionStoreProperties)
        assert props.ttl == 60
        assert props.db == 3

    def test_bind_requires_decorator(self):
        @dataclass
        class Plain:
            value: int = 1

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)

    def test_env_key_format(self):
        assert Config._env_key("kvsession.session.prefix") == "KVSESSION_SESSION_PREFIX"
