"""Unit tests for CLI error handling."""

import click
import pytest
from click.testing import CliRunner

from chantier_tracker.cli.error_handlers import (
    CLIError,
    ConfigurationError,
    handle_cli_error,
    is_debug,
    with_error_handling,
)
from chantier_tracker.errors import RecordSourceError, SiteNotFoundError


class TestHandleCliError:
    def test_configuration_error(self, capsys):
        error = ConfigurationError("No user id given", recovery_hint="Pass --user")
        assert handle_cli_error(error) == 1
        out = capsys.readouterr().out
        assert "Configuration Error: No user id given" in out
        assert "Hint: Pass --user" in out

    def test_record_source_error(self, capsys):
        assert handle_cli_error(RecordSourceError("Data file not found: x")) == 2
        assert "Data Error: Data file not found: x" in capsys.readouterr().out

    def test_site_not_found(self, capsys):
        assert handle_cli_error(SiteNotFoundError(9)) == 3
        out = capsys.readouterr().out
        assert "Site '9' not found" in out
        assert "chantier-cli sites" in out

    def test_abort(self):
        assert handle_cli_error(click.Abort()) == 130

    def test_unexpected_error_without_debug(self, capsys):
        assert handle_cli_error(RuntimeError("boom")) == 255
        out = capsys.readouterr().out
        assert "Unexpected Error: RuntimeError" in out
        assert "--debug" in out

    def test_unexpected_error_with_debug(self, capsys):
        try:
            raise RuntimeError("boom")
        except RuntimeError as error:
            assert handle_cli_error(error, debug=True) == 255
        assert "Full stack trace" in capsys.readouterr().out

    def test_cli_error_keeps_hint(self):
        error = CLIError("Bad input", recovery_hint="Try again")
        assert error.message == "Bad input"
        assert error.recovery_hint == "Try again"
        assert str(error) == "Bad input"


class TestWithErrorHandling:
    def make_command(self, error):
        @click.command()
        @click.pass_context
        def command(ctx):
            with with_error_handling(is_debug(ctx)):
                raise error

        return command

    def test_exit_code_from_error(self):
        result = CliRunner().invoke(self.make_command(SiteNotFoundError("7")))
        assert result.exit_code == 3
        assert "Site '7' not found" in result.output

    def test_usage_errors_pass_through(self):
        result = CliRunner().invoke(self.make_command(click.UsageError("bad usage")))
        assert result.exit_code == 2
        assert "bad usage" in result.output

    def test_no_error(self):
        @click.command()
        def command():
            with with_error_handling():
                click.echo("ok")

        result = CliRunner().invoke(command)
        assert result.exit_code == 0
        assert result.output == "ok\n"


class TestIsDebug:
    @pytest.mark.parametrize(
        "obj,expected", [(None, False), ({}, False), ({"debug": True}, True)]
    )
    def test_reads_context_object(self, obj, expected):
        ctx = click.Context(click.Command("x"), obj=obj)
        assert is_debug(ctx) is expected
