"""Tests for build configuration loading."""

from pathlib import Path

import pytest

from tokensmith.config import (
    ENV_OUTPUT_DIR,
    ENV_PAGES_DIR,
    ENV_TOKENS_DIR,
    BuildConfig,
    load_config,
)
from tokensmith.core.errors import ConfigError


class TestDefaults:
    def test_default_paths(self):
        config = BuildConfig()

        assert config.tokens_dir == Path.home() / "Projects" / "tokens"
        assert config.base_dir == config.tokens_dir / "base"
        assert config.alias_dir == config.tokens_dir / "alias"
        assert config.css_path == Path("styles") / "tokens.css"
        assert config.sass_path == Path("styles") / "_tokens.sass"
        assert config.pages_dir == Path("dist")
        assert config.strict is False

    def test_with_overrides_ignores_none(self, tmp_path: Path):
        config = BuildConfig(tokens_dir=tmp_path)

        updated = config.with_overrides(tokens_dir=None, strict=True)

        assert updated.tokens_dir == tmp_path
        assert updated.strict is True
        assert config.strict is False


class TestLoadConfig:
    def test_no_file_uses_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        config = load_config(env={})

        assert config == BuildConfig()

    def test_file_settings_relative_to_file(self, tmp_path: Path):
        config_file = tmp_path / "tokensmith.toml"
        config_file.write_text(
            """
[tokens]
dir = "design/tokens"
alias = "aliases"

[output]
styles = "src/styles"
pages = "site"
sass = "_vars.sass"

[pages]
brand = "Acme DS"

[project]
overrides = "overrides.json"
"""
        )

        config = load_config(config_file, env={})

        assert config.tokens_dir == tmp_path / "design" / "tokens"
        assert config.alias_dir == tmp_path / "design" / "tokens" / "aliases"
        assert config.output_dir == tmp_path / "src" / "styles"
        assert config.pages_dir == tmp_path / "site"
        assert config.sass_path == tmp_path / "src" / "styles" / "_vars.sass"
        assert config.css_path.name == "tokens.css"
        assert config.brand_name == "Acme DS"
        assert config.overrides_path == tmp_path / "overrides.json"

    def test_environment_beats_file(self, tmp_path: Path):
        config_file = tmp_path / "tokensmith.toml"
        config_file.write_text('[tokens]\ndir = "from-file"\n')

        config = load_config(
            config_file,
            env={
                ENV_TOKENS_DIR: str(tmp_path / "from-env"),
                ENV_OUTPUT_DIR: str(tmp_path / "css"),
                ENV_PAGES_DIR: str(tmp_path / "html"),
            },
        )

        assert config.tokens_dir == tmp_path / "from-env"
        assert config.output_dir == tmp_path / "css"
        assert config.pages_dir == tmp_path / "html"

    def test_explicit_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Config file not found"):
            load_config(tmp_path / "missing.toml", env={})

    def test_invalid_toml(self, tmp_path: Path):
        config_file = tmp_path / "tokensmith.toml"
        config_file.write_text("[tokens\ndir = ")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(config_file, env={})

    def test_non_string_path(self, tmp_path: Path):
        config_file = tmp_path / "tokensmith.toml"
        config_file.write_text("[tokens]\ndir = 3\n")

        with pytest.raises(ConfigError, match="tokens.dir must be a string path"):
            load_config(config_file, env={})
