"""Tests for colorkit.cli module."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from colorkit.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestMain:
    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "colorkit, version 0.1.0" in result.output

    def test_help_lists_commands(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        for command in ("palette", "inspect", "adjust", "random", "diff"):
            assert command in result.output


class TestPaletteCommand:
    """Test the palette command."""

    def test_triad(self, runner):
        result = runner.invoke(main, ["palette", "#FF0000", "-s", "triad"])
        assert result.exit_code == 0
        assert result.output.split() == ["#FF0000", "#0000FF", "#00FF00"]

    def test_default_is_complementary(self, runner):
        result = runner.invoke(main, ["palette", "#FF0000"])
        assert result.exit_code == 0
        assert result.output.split()[0] == "#00FFFF"

    def test_json_output(self, runner):
        result = runner.invoke(
            main, ["palette", "#FF0000", "-s", "triad", "-F", "json"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == ["#FF0000", "#0000FF", "#00FF00"]

    def test_legacy_strategy_spelling(self, runner):
        result = runner.invoke(main, ["palette", "#FF0000", "-s", "analagous"])
        assert result.exit_code == 0
        assert len(result.output.split()) == 3

    def test_darken(self, runner):
        result = runner.invoke(
            main, ["palette", "#FF0000", "-s", "triad", "--darken", "0.5", "-f", "string"]
        )
        assert result.exit_code == 0
        assert result.output.split()[0] == "50,0,0"

    def test_inverted(self, runner):
        result = runner.invoke(main, ["palette", "rgb(255, 0, 0)", "-s", "inverted"])
        assert result.exit_code == 0
        assert result.output.split() == ["#00FFFF"]

    def test_unfetchable_strategy_notice(self, runner):
        result = runner.invoke(main, ["palette", "#FF0000", "-s", "hue"])
        assert result.exit_code == 0
        assert "has no palette" in result.output
        assert "#FF0000" in result.output

    def test_invalid_color(self, runner):
        result = runner.invoke(main, ["palette", "not-a-color"])
        assert result.exit_code == 1
        assert "Error: Invalid color format" in result.output

    def test_invalid_strategy(self, runner):
        result = runner.invoke(main, ["palette", "#FF0000", "-s", "tetrad"])
        assert result.exit_code == 2

    def test_png_requires_output(self, runner):
        result = runner.invoke(main, ["palette", "#FF0000", "-F", "png"])
        assert result.exit_code == 1
        assert "PNG output requires -o/--output" in result.output

    def test_png_output(self, runner):
        with patch("colorkit.cli.create_png_swatch") as mock_swatch:
            result = runner.invoke(
                main,
                ["palette", "#FF0000", "-s", "triad", "-F", "png", "-o", "out.png",
                 "--tile-size", "16", "--tile-margin", "2"],
            )
        assert result.exit_code == 0
        mock_swatch.assert_called_once()
        args, kwargs = mock_swatch.call_args
        assert len(args[0]) == 3
        assert args[1] == "out.png"
        assert kwargs == {"tile_size": 16, "tile_margin": 2}

    def test_png_error(self, runner):
        with patch("colorkit.cli.create_png_swatch", side_effect=OSError("disk full")):
            result = runner.invoke(
                main, ["palette", "#FF0000", "-F", "png", "-o", "out.png"]
            )
        assert result.exit_code == 1
        assert "could not create PNG: disk full" in result.output


class TestInspectCommand:
    """Test the inspect command."""

    def test_red(self, runner):
        result = runner.invoke(main, ["inspect", "#FF0000"])
        assert result.exit_code == 0
        assert "hex:        #FF0000" in result.output
        assert "string:     100,0,0" in result.output
        assert "hsb:        hsb(0, 100%, 100%)" in result.output
        assert "black:      no" in result.output
        assert "strong:     yes" in result.output

    def test_dark_grey(self, runner):
        result = runner.invoke(main, ["inspect", "10,10,10"])
        assert result.exit_code == 0
        assert "black:      yes" in result.output
        assert "greyscale:  no" in result.output

    def test_invalid(self, runner):
        result = runner.invoke(main, ["inspect", "rgb(300, 0, 0)"])
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestAdjustCommand:
    """Test the adjust command."""

    def test_no_changes(self, runner):
        result = runner.invoke(main, ["adjust", "#3A7BD5"])
        assert result.exit_code == 0
        assert result.output.strip() == "#3A7BD5"

    def test_darken(self, runner):
        result = runner.invoke(main, ["adjust", "#FF0000", "--darken", "0.5"])
        assert result.exit_code == 0
        assert result.output.strip() == "#800000"

    def test_hue(self, runner):
        result = runner.invoke(main, ["adjust", "#FF0000", "--hue", "0.5"])
        assert result.exit_code == 0
        assert result.output.strip() == "#00FFFF"

    def test_invert(self, runner):
        result = runner.invoke(main, ["adjust", "#FF0000", "--invert"])
        assert result.exit_code == 0
        assert result.output.strip() == "#00FFFF"

    def test_normalized_brighten(self, runner):
        result = runner.invoke(
            main, ["adjust", "40,0,0", "--brighten", "0.5", "--normalized", "-f", "string"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "60,0,0"

    def test_desaturate(self, runner):
        result = runner.invoke(main, ["adjust", "#FF0000", "--saturate", "-1"])
        assert result.exit_code == 0
        assert result.output.strip() == "#FFFFFF"


class TestRandomCommand:
    """Test the random command."""

    def test_seeded_is_reproducible(self, runner):
        first = runner.invoke(main, ["random", "-n", "3", "--seed", "7"])
        second = runner.invoke(main, ["random", "-n", "3", "--seed", "7"])
        assert first.exit_code == 0
        assert first.output == second.output
        assert len(first.output.split()) == 3

    def test_greyscale(self, runner):
        result = runner.invoke(
            main, ["random", "-n", "5", "--greyscale", "--seed", "1", "-f", "string"]
        )
        assert result.exit_code == 0
        for line in result.output.split():
            r, g, b = (int(v) for v in line.split(","))
            assert r == g == b
            assert 25 <= r <= 75

    def test_restrict_decimals(self, runner):
        result = runner.invoke(
            main, ["random", "--restrict-decimals", "--seed", "3", "-f", "raw"]
        )
        assert result.exit_code == 0
        values = result.output.strip().strip("()").split(", ")
        assert all(v.endswith("00") for v in values)

    def test_number_range(self, runner):
        result = runner.invoke(main, ["random", "-n", "0"])
        assert result.exit_code == 2


class TestDiffCommand:
    """Test the diff command."""

    def test_black_and_white(self, runner):
        result = runner.invoke(main, ["diff", "#000000", "#FFFFFF"])
        assert result.exit_code == 0
        assert "difference:      1.0000" in result.output
        assert "raw difference:  1.0000" in result.output
        assert "approx. equal:   no" in result.output

    def test_close_colors(self, runner):
        result = runner.invoke(main, ["diff", "50,50,50", "52,50,48"])
        assert result.exit_code == 0
        assert "approx. equal:   yes" in result.output

    def test_threshold(self, runner):
        result = runner.invoke(main, ["diff", "50,50,50", "60,50,50", "-t", "0.2"])
        assert result.exit_code == 0
        assert "approx. equal:   yes" in result.output

    def test_invalid(self, runner):
        result = runner.invoke(main, ["diff", "#000000", "nope"])
        assert result.exit_code == 1
        assert "Error:" in result.output
