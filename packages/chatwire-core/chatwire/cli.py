"""CLI — send conversation files and check what would be sent."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

app = typer.Typer(name="chatwire", help="Chat-completions CLI")


@app.command()
def complete(
    conversation_path: Path = typer.Argument(..., help="Path to conversation YAML/JSON file"),
    secrets: Path = typer.Option(None, "--secrets", "-s", help="Credentials file (default: $CHATWIRE_SECRETS_FILE or secrets.json)"),
    model: str = typer.Option(None, "--model", "-m", help="Model override (precedence: this option, the file's model, $CHATWIRE_MODEL)"),
    temperature: float = typer.Option(None, "--temperature", "-t", help="Sampling temperature override"),
    max_tokens: int = typer.Option(None, "--max-tokens", help="Completion length override"),
    json_output: bool = typer.Option(False, "--json", help="Output the full response as JSON"),
    append: bool = typer.Option(False, "--append", help="Append the reply to the conversation file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log request details to stderr"),
) -> None:
    """Send a conversation and print the first completion."""
    from chatwire.client import CompletionError, CredentialsError, get_completion_client, load_credentials
    from chatwire.client._config import get_model, get_secrets_file
    from chatwire.utils.yaml_io import save_conversation

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    conversation = _load_or_exit(conversation_path)
    params = conversation.parameters.model_copy()
    try:
        if model:
            params.model = model
        elif get_model() and "model" not in conversation.parameters.model_fields_set:
            params.model = get_model()
        if temperature is not None:
            params.temperature = temperature
        if max_tokens is not None:
            params.max_output_tokens = max_tokens
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    try:
        credentials = load_credentials(secrets or Path(get_secrets_file()))
        client = get_completion_client()
    except (CredentialsError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    with client:
        try:
            response = client.complete(conversation.transcript(), params, credentials)
        except CompletionError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1)

    message = response.first_message
    if json_output:
        typer.echo(json.dumps(response.model_dump(mode="json"), indent=2))
    elif message is None:
        typer.echo("No completion available", err=True)
    else:
        typer.echo(message.content)

    if append and message is not None:
        conversation.turns.append(message)
        save_conversation(conversation, conversation_path)


@app.command()
def envelope(
    conversation_path: Path = typer.Argument(..., help="Path to conversation YAML/JSON file"),
) -> None:
    """Print the request body that would be sent, without sending it."""
    from chatwire.models.request import CompletionRequest

    conversation = _load_or_exit(conversation_path)
    request = CompletionRequest.build(conversation.transcript(), conversation.parameters)
    typer.echo(json.dumps(request.model_dump(mode="json"), indent=2))


@app.command()
def validate(
    conversation_path: Path = typer.Argument(..., help="Path to conversation YAML/JSON file"),
) -> None:
    """Validate a conversation file (roles, parameters, structure)."""
    conversation = _load_or_exit(conversation_path, prefix="FAIL")
    typer.echo(f"OK — {len(conversation.turns)} turn(s), model {conversation.parameters.model}")


def _load_or_exit(path: Path, prefix: str = "Error") -> "Conversation":
    from chatwire.utils.yaml_io import load_conversation

    try:
        return load_conversation(path)
    except (OSError, ValueError) as exc:
        typer.echo(f"{prefix}: {exc}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
