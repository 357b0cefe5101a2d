"""Tests for the noisemap command-line interface."""

import pytest

from noisemap.cli import build_parser, main


class TestBuildParser:
    """Tests for the argument parser."""

    def test_defaults_are_unset(self) -> None:
        """Overrides default to None so config values win."""
        args = build_parser().parse_args([])
        assert args.config is None
        assert args.width is None
        assert args.offset_x is None
        assert args.strict is False

    def test_parses_overrides(self) -> None:
        """Numeric options are typed."""
        args = build_parser().parse_args(
            ["--width", "16", "--scale", "2.5", "--offset-y", "-3"]
        )
        assert args.width == 16
        assert args.scale == 2.5
        assert args.offset_y == -3.0


class TestMain:
    """Tests for main."""

    def test_generates_summary(self, capsys) -> None:
        """Default run prints the map summary."""
        main(["--width", "16", "--height", "8", "--seed", "3"])
        out = capsys.readouterr().out
        assert "Generating 16x8 noise map with seed 3" in out
        assert "Shape: 16x8" in out
        assert "Min: 0.0000  Max: 1.0000" in out

    def test_uses_config_file(self, config_file, capsys) -> None:
        """Config file values are used."""
        main(["--config", str(config_file)])
        out = capsys.readouterr().out
        assert "Shape: 64x48" in out

    def test_cli_overrides_config(self, config_file, capsys) -> None:
        """Command-line values take precedence over the config file."""
        main(["--config", str(config_file), "--width", "10", "--offset-x", "1"])
        out = capsys.readouterr().out
        assert "Shape: 10x48" in out

    def test_clamps_without_strict(self, capsys) -> None:
        """Out-of-range values are clamped by default."""
        main(["--width", "-5", "--height", "4"])
        out = capsys.readouterr().out
        assert "Shape: 1x4" in out

    def test_strict_rejects_invalid(self) -> None:
        """Strict mode exits with an error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--strict", "--scale", "0"])
        assert exc_info.value.code == 1

    def test_missing_config_exits(self, temp_dir) -> None:
        """A missing config file exits with an error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(temp_dir / "missing.toml")])
        assert exc_info.value.code == 1
