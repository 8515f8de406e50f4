"""Main entry point for the Tether CLI."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import typer
from pydantic_core import to_json

from tether_sdk import AppClient, BearerTokenAuthProvider, TetherError, TwilioServiceClient
from tether_sdk.config import get_config
from tether_sdk.logging import setup_logging

app = typer.Typer(help="Call functions of a Tether application.")

T = TypeVar("T")


def _run(operation: Callable[[AppClient], Awaitable[T]], token: str | None, **overrides: Any) -> T:
    config = get_config()
    updates = {key: value for key, value in overrides.items() if value is not None}
    if updates:
        config = config.model_copy(update=updates)
    setup_logging(config.logging)

    async def run() -> T:
        auth = BearerTokenAuthProvider(token) if token else None
        async with AppClient.from_config(config, auth) as client:
            return await operation(client)

    try:
        return asyncio.run(run())
    except TetherError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1) from e


@app.command()  # type: ignore[misc]
def version() -> None:
    """Show the Tether CLI version."""
    typer.echo("Tether CLI version 0.1.0")


@app.command()  # type: ignore[misc]
def call(
    name: str = typer.Argument(..., help="Name of the function to call"),
    args: str = typer.Argument("[]", help="JSON array of function arguments"),
    service: str | None = typer.Option(None, "--service", "-s", help="Service to scope to"),
    timeout: float | None = typer.Option(None, "--timeout", "-t", help="Timeout in seconds"),
    token: str | None = typer.Option(None, envvar="TETHER_TOKEN", help="Access token"),
    app_id: str | None = typer.Option(None, "--app-id", help="Client application ID"),
    base_url: str | None = typer.Option(None, "--base-url", help="Platform base URL"),
) -> None:
    """Call a function and print its result as JSON."""
    try:
        parsed_args = json.loads(args)
    except json.JSONDecodeError as e:
        typer.echo(f"Error: arguments are not valid JSON: {e}", err=True)
        raise typer.Exit(code=2) from e
    if not isinstance(parsed_args, list):
        typer.echo("Error: arguments must be a JSON array", err=True)
        raise typer.Exit(code=2)

    async def operation(client: AppClient) -> Any:
        functions = client.service_client(lambda service: service, service)
        return await functions.call_function(
            name, parsed_args, request_timeout=timeout, result_type=Any
        )

    result = _run(operation, token, app_id=app_id, base_url=base_url)
    typer.echo(to_json(result, indent=2).decode())


@app.command("twilio-send")  # type: ignore[misc]
def twilio_send(
    service: str = typer.Option(..., "--service", "-s", help="Twilio service name"),
    to: str = typer.Option(..., "--to", help="Destination phone number"),
    from_: str = typer.Option(..., "--from", help="Sending phone number"),
    body: str = typer.Option(..., "--body", help="Message text"),
    media_url: str | None = typer.Option(None, "--media-url", help="Media to attach"),
    token: str | None = typer.Option(None, envvar="TETHER_TOKEN", help="Access token"),
    app_id: str | None = typer.Option(None, "--app-id", help="Client application ID"),
    base_url: str | None = typer.Option(None, "--base-url", help="Platform base URL"),
) -> None:
    """Send a message through a Twilio service."""

    async def operation(client: AppClient) -> None:
        twilio = client.service_client(TwilioServiceClient, service)
        await twilio.send_message(to=to, from_=from_, body=body, media_url=media_url)

    _run(operation, token, app_id=app_id, base_url=base_url)
    typer.echo("Message sent")


if __name__ == "__main__":
    app()
