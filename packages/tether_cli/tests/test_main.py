"""Tests for CLI main module."""

import json
from unittest.mock import AsyncMock, patch

from tether_cli.main import app
from tether_sdk.clients.app_client import AppClient
from tether_sdk.clients.auth_request_client import AuthRequestClient
from tether_sdk.exceptions import RequestFailedError
from typer.testing import CliRunner

runner = CliRunner()


def make_app_client() -> tuple[AppClient, AsyncMock]:
    request_client = AsyncMock(spec=AuthRequestClient)
    return AppClient("cli-app", request_client), request_client


class TestCLICommands:
    """Test CLI commands."""

    def test_version_command(self) -> None:
        """Test version command."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "Tether CLI version 0.1.0" in result.stdout

    def test_help_command(self) -> None:
        """Test help command."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "call" in result.stdout
        assert "twilio-send" in result.stdout

    def test_invalid_command(self) -> None:
        """Test invalid command."""
        result = runner.invoke(app, ["invalid"])
        assert result.exit_code != 0


class TestCallCommand:
    """Test the call command."""

    def test_call_prints_result(self) -> None:
        """Test a function result is printed as JSON."""
        client, request_client = make_app_client()
        request_client.do_authenticated_request_decoded.return_value = {"sum": 3}

        with patch("tether_cli.main.AppClient.from_config", return_value=client):
            result = runner.invoke(app, ["call", "sum", "[1, 2]", "--timeout", "5"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == {"sum": 3}
        request = request_client.do_authenticated_request_decoded.await_args[0][0]
        assert request.document == {"name": "sum", "args": [1, 2]}
        assert request.timeout == 5.0

    def test_call_scoped_to_service(self) -> None:
        """Test --service scopes the call."""
        client, request_client = make_app_client()
        request_client.do_authenticated_request_decoded.return_value = None

        with patch("tether_cli.main.AppClient.from_config", return_value=client):
            result = runner.invoke(app, ["call", "lookup", "--service", "http1"])

        assert result.exit_code == 0, result.output
        request = request_client.do_authenticated_request_decoded.await_args[0][0]
        assert request.document == {"name": "lookup", "args": [], "service": "http1"}

    def test_call_reports_sdk_errors(self) -> None:
        """Test SDK errors exit with code 1 and a message."""
        client, request_client = make_app_client()
        request_client.do_authenticated_request_decoded.side_effect = RequestFailedError(
            404, "function not found"
        )

        with patch("tether_cli.main.AppClient.from_config", return_value=client):
            result = runner.invoke(app, ["call", "missing"])

        assert result.exit_code == 1
        assert "Error: Request failed with status 404: function not found" in result.output

    def test_call_rejects_invalid_json(self) -> None:
        """Test malformed arguments are rejected before any call."""
        with patch("tether_cli.main.AppClient.from_config") as from_config:
            result = runner.invoke(app, ["call", "sum", "[1,"])

        assert result.exit_code == 2
        from_config.assert_not_called()

    def test_call_rejects_non_array(self) -> None:
        """Test arguments must be a JSON array."""
        result = runner.invoke(app, ["call", "sum", '{"a": 1}'])

        assert result.exit_code == 2
        assert "must be a JSON array" in result.output


class TestTwilioSendCommand:
    """Test the twilio-send command."""

    def test_twilio_send(self) -> None:
        """Test a message is sent through the named Twilio service."""
        client, request_client = make_app_client()

        with patch("tether_cli.main.AppClient.from_config", return_value=client):
            result = runner.invoke(
                app,
                [
                    "twilio-send",
                    "--service",
                    "twilio1",
                    "--to",
                    "+15551230000",
                    "--from",
                    "+15550001111",
                    "--body",
                    "hello",
                ],
            )

        assert result.exit_code == 0, result.output
        assert "Message sent" in result.stdout
        request = request_client.do_authenticated_request_discarding_result.await_args[0][0]
        assert request.document == {
            "name": "send",
            "service": "twilio1",
            "args": [{"to": "+15551230000", "from": "+15550001111", "body": "hello"}],
        }
