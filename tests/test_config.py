"""Tests for TOML config file loading."""

from __future__ import annotations

from pathlib import Path

from markscan.cli import build_parser, load_config, resolve_options


def _resolve(tmp_path: Path, *extra: str):
    doc = tmp_path / "doc.html"
    doc.write_text("")
    ns = build_parser().parse_args([str(doc), *extra])
    return resolve_options(ns)


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text('[display]\nlanguage = "js"\n')
        result = load_config(cfg, tmp_path)
        assert result["display"] == {"language": "js"}

    def test_auto_discover_markscan_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "markscan.toml"
        cfg.write_text("[display]\nline_numbers = false\n")
        result = load_config(None, tmp_path)
        assert result["display"] == {"line_numbers": False}


class TestConfigMerge:
    def test_defaults(self, tmp_path: Path) -> None:
        opts = _resolve(tmp_path)
        assert opts.language == "html"
        assert opts.line_numbers is True

    def test_config_applied(self, tmp_path: Path) -> None:
        (tmp_path / "markscan.toml").write_text(
            '[display]\nlanguage = "css"\nline_numbers = false\n'
        )
        opts = _resolve(tmp_path)
        assert opts.language == "css"
        assert opts.line_numbers is False

    def test_cli_overrides_config(self, tmp_path: Path) -> None:
        (tmp_path / "markscan.toml").write_text(
            '[display]\nlanguage = "css"\nline_numbers = false\n'
        )
        opts = _resolve(tmp_path, "-l", "js", "--lines")
        assert opts.language == "js"
        assert opts.line_numbers is True

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "other.toml"
        cfg.write_text('[display]\nlanguage = "svelte"\n')
        opts = _resolve(tmp_path, "--config", str(cfg))
        assert opts.language == "svelte"

    def test_wrong_types_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "markscan.toml").write_text(
            '[display]\nlanguage = 3\nline_numbers = "no"\n'
        )
        opts = _resolve(tmp_path)
        assert opts.language == "html"
        assert opts.line_numbers is True

    def test_output_path(self, tmp_path: Path) -> None:
        opts = _resolve(tmp_path, "-o", "out.html")
        assert opts.output_file == Path("out.html")
