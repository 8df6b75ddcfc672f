"""Tests for the pipeline CLI commands."""

from unittest.mock import MagicMock

import pytest
import typer
from typer.testing import CliRunner

from funcpipe.cli import app
from funcpipe.cli.pipeline import parse_items, resolve_reference


class DescribeParseItems:
    def it_resolves_references_to_callables(self) -> None:
        import os.path

        items = parse_items(["os.path:basename", "/tmp/a.txt"])

        assert items == [os.path.basename, "/tmp/a.txt"]

    def it_keeps_other_tokens_as_strings(self) -> None:
        assert parse_items(["hello", "a:b c", "./x:y"]) == ["hello", "a:b c", "./x:y"]

    def it_rejects_unknown_modules(self) -> None:
        with pytest.raises(typer.BadParameter):
            resolve_reference("funcpipe_no_such_module:thing")

    def it_rejects_unknown_attributes(self) -> None:
        with pytest.raises(typer.BadParameter):
            resolve_reference("os.path:no_such_function")

    def it_rejects_non_callables(self) -> None:
        with pytest.raises(typer.BadParameter):
            resolve_reference("os:sep")


class DescribeRunCommand:
    def it_runs_the_pipeline(
        self, runner: CliRunner, mock_configure_logging: MagicMock
    ) -> None:
        result = runner.invoke(app, ["run", "builtins:print", "hello", "world"])

        assert result.exit_code == 0
        assert "hello world" in result.stdout
        mock_configure_logging.assert_called_once()

    def it_exits_with_an_error_when_an_operation_fails(self, runner: CliRunner) -> None:
        # basename returns a value, which counts as a failure indicator
        result = runner.invoke(app, ["run", "os.path:basename", "/tmp/a.txt"])

        assert result.exit_code == 1

    def it_exits_with_an_error_on_malformed_pipelines(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["run", "hello", "builtins:print"])

        assert result.exit_code == 1

    def it_reports_bad_references_as_usage_errors(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["run", "funcpipe_no_such_module:thing"])

        assert result.exit_code == 2


class DescribePlanCommand:
    def it_prints_bound_steps(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["plan", "builtins:print", "a", "b", "os.path:basename", "c"])

        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert lines == ["[0] print('a', 'b')", "[3] basename('c')"]

    def it_does_not_invoke_operations(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["plan", "builtins:print", "unseen"])

        assert result.exit_code == 0
        assert "unseen'" in result.stdout
        assert "\nunseen\n" not in result.stdout

    def it_exits_with_an_error_on_binding_errors(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["plan", "os.path:basename"])

        assert result.exit_code == 1
