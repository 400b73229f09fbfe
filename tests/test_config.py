"""Tests for TOML config file loading."""

from __future__ import annotations

from pathlib import Path

from foamls.cli import build_parser, load_config, resolve_options


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[lexer]\nidentifiers = true\n")
        result = load_config(cfg, tmp_path)
        assert result["lexer"] == {"identifiers": True}

    def test_auto_discover_foamls_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "foamls.toml"
        cfg.write_text('[server]\nlog_level = "debug"\n')
        result = load_config(None, tmp_path)
        assert result["server"] == {"log_level": "debug"}


class TestConfigMerge:
    def test_default_is_strict(self, tmp_path: Path) -> None:
        doc = tmp_path / "U"
        doc.write_text("")
        ns = build_parser().parse_args([str(doc)])
        assert resolve_options(ns).identifiers is False

    def test_config_identifiers(self, tmp_path: Path) -> None:
        (tmp_path / "foamls.toml").write_text("[lexer]\nidentifiers = true\n")
        doc = tmp_path / "U"
        doc.write_text("")
        ns = build_parser().parse_args([str(doc)])
        assert resolve_options(ns).identifiers is True

    def test_cli_overrides_config(self, tmp_path: Path) -> None:
        (tmp_path / "foamls.toml").write_text("[lexer]\nidentifiers = false\n")
        doc = tmp_path / "U"
        doc.write_text("")
        ns = build_parser().parse_args([str(doc), "--identifiers"])
        assert resolve_options(ns).identifiers is True

    def test_non_bool_is_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "foamls.toml").write_text('[lexer]\nidentifiers = "yes"\n')
        doc = tmp_path / "U"
        doc.write_text("")
        ns = build_parser().parse_args([str(doc)])
        assert resolve_options(ns).identifiers is False

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "alt.toml"
        cfg.write_text("[lexer]\nidentifiers = true\n")
        doc = tmp_path / "U"
        doc.write_text("")
        ns = build_parser().parse_args([str(doc), "--config", str(cfg)])
        assert resolve_options(ns).identifiers is True

    def test_config_enables_identifiers_end_to_end(self, tmp_path: Path) -> None:
        from foamls.cli import main

        (tmp_path / "foamls.toml").write_text("[lexer]\nidentifiers = true\n")
        doc = tmp_path / "U"
        doc.write_text("inlet { type patch; }\n")
        assert main([str(doc)]) == 0
