"""Tests for the objectkit CLI commands."""
from __future__ import annotations

import click
import pytest
from click.testing import CliRunner

from objectkit import __version__
from objectkit.cli.main import cli
from objectkit.cli.selector import build_selector


@pytest.fixture
def runner():
    return CliRunner()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self, runner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "CSS selector builder" in result.output
        for command in ("selector", "rectangle", "area"):
            assert command in result.output

    def test_version(self, runner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# selector command
# ---------------------------------------------------------------------------


class TestSelectorCommand:
    def test_compound(self, runner) -> None:
        result = runner.invoke(
            cli, ["selector", "element=a", 'attr=href$=".png"', "pseudo-class=focus"]
        )
        assert result.exit_code == 0
        assert result.output == 'a[href$=".png"]:focus\n'

    def test_combinators(self, runner) -> None:
        result = runner.invoke(
            cli,
            ["selector", "element=div", "id=main", "+", "element=table", "~", "element=tr",
             "_", "element=td"],
        )
        assert result.exit_code == 0
        assert result.output == "div#main + table ~ tr   td\n"

    def test_out_of_order(self, runner) -> None:
        result = runner.invoke(cli, ["selector", "class=x", "element=a"])
        assert result.exit_code == 1
        assert "Selector error" in result.output
        assert "arranged in the following order" in result.output

    def test_duplicate(self, runner) -> None:
        result = runner.invoke(cli, ["selector", "id=a", "id=b"])
        assert result.exit_code == 1
        assert "more then one time" in result.output

    def test_unknown_kind(self, runner) -> None:
        result = runner.invoke(cli, ["selector", "tag=a"])
        assert result.exit_code == 2
        assert "Invalid token" in result.output

    def test_requires_tokens(self, runner) -> None:
        result = runner.invoke(cli, ["selector"])
        assert result.exit_code == 2


class TestBuildSelector:
    def test_single_compound(self) -> None:
        assert build_selector(["element=li", "class=a", "class=b"]).stringify() == "li.a.b"

    def test_folds_left_to_right(self) -> None:
        built = build_selector(["element=a", ">", "element=b", "+", "element=c"])
        assert built.stringify() == "a > b + c"

    def test_space_token_is_descendant(self) -> None:
        assert build_selector(["element=a", " ", "element=b"]).stringify() == "a   b"

    def test_leading_combinator(self) -> None:
        with pytest.raises(click.UsageError, match="must follow a selector"):
            build_selector([">", "element=a"])

    def test_double_combinator(self) -> None:
        with pytest.raises(click.UsageError, match="must follow a selector"):
            build_selector(["element=a", ">", "~", "element=b"])

    def test_trailing_combinator(self) -> None:
        with pytest.raises(click.UsageError, match="cannot end with a combinator"):
            build_selector(["element=a", ">"])

    def test_ordering_restarts_per_compound(self) -> None:
        built = build_selector(["class=x", "~", "element=a"])
        assert built.stringify() == ".x ~ a"


# ---------------------------------------------------------------------------
# rectangle / area commands
# ---------------------------------------------------------------------------


class TestRectangleCommand:
    def test_prints_json_and_area(self, runner) -> None:
        result = runner.invoke(cli, ["rectangle", "10", "20"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ['{"width":10,"height":20}', "Area: 200"]

    def test_fractional(self, runner) -> None:
        result = runner.invoke(cli, ["rectangle", "2.5", "3"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ['{"width":2.5,"height":3}', "Area: 7.5"]

    def test_indent_option(self, runner) -> None:
        result = runner.invoke(cli, ["rectangle", "1", "2", "--indent", "2"])
        assert result.exit_code == 0
        assert result.output.startswith('{\n  "width": 1,\n  "height": 2\n}')

    def test_indent_from_env(self, runner) -> None:
        result = runner.invoke(
            cli, ["rectangle", "1", "2"], env={"OBJECTKIT_JSON_INDENT": "2"}
        )
        assert result.exit_code == 0
        assert '  "width": 1' in result.output


class TestAreaCommand:
    def test_area(self, runner) -> None:
        result = runner.invoke(cli, ["area", '{"width":10,"height":20}'])
        assert result.exit_code == 0
        assert result.output == "Area: 200\n"

    def test_malformed(self, runner) -> None:
        result = runner.invoke(cli, ["area", '{"width":'])
        assert result.exit_code == 1
        assert "JSON error" in result.output

    def test_not_an_object(self, runner) -> None:
        result = runner.invoke(cli, ["area", "[1,2]"])
        assert result.exit_code == 1
        assert "JSON error" in result.output

    def test_missing_dimension(self, runner) -> None:
        result = runner.invoke(cli, ["area", '{"width":10}'])
        assert result.exit_code == 1
        assert "Not a rectangle" in result.output

    def test_non_numeric_area(self, runner) -> None:
        result = runner.invoke(cli, ["area", '{"width":"ab","height":2}'])
        assert result.exit_code == 1
        assert "Not a rectangle" in result.output
        assert "is not a number" in result.output


class TestEnvironmentConfig:
    def test_bad_indent_is_usage_error(self, runner) -> None:
        result = runner.invoke(cli, ["rectangle", "1", "2"], env={"OBJECTKIT_JSON_INDENT": "abc"})
        assert result.exit_code == 2
        assert "OBJECTKIT_JSON_INDENT must be an integer" in result.output

    def test_bad_log_level_is_usage_error(self, runner) -> None:
        result = runner.invoke(cli, ["rectangle", "1", "2"], env={"OBJECTKIT_LOG_LEVEL": "verbose"})
        assert result.exit_code == 2
        assert "OBJECTKIT_LOG_LEVEL must be one of" in result.output
