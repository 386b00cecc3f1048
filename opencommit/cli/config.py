"""CLI commands for configuration management."""

from typing import List

import typer

from opencommit import global_config
from opencommit.config import (
    AiProvider,
    ConfigError,
    NO_KEY_PROVIDERS,
    API_KEY_ENV_VARS,
    DEFAULT_MODELS,
    build_config,
    default_model_for_provider,
    env_var_for_key,
    load_config,
    normalize_key,
)

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage opencommit configuration in ~/.opencommit/",
    add_completion=False,
)

_STOCK_MODELS = set(DEFAULT_MODELS.values())


def _format_value(value) -> str:
    if isinstance(value, AiProvider):
        return value.value
    if isinstance(value, bool):
        return str(value).lower()
    if value is None:
        return ""
    return str(value)


def _stored_value(value):
    """Convert a validated value to what is written to config.yaml."""
    return value.value if isinstance(value, AiProvider) else value


def _mask(api_key: str) -> str:
    return api_key[:8] + "..." + api_key[-4:] if len(api_key) > 12 else "***"


@config_app.command("get")
def config_get(
    keys: List[str] = typer.Argument(..., help="Config keys to read (e.g. OCO_MODEL or model)"),
) -> None:
    """Print the effective value of one or more config keys."""
    try:
        config = load_config()
        for key in keys:
            name = normalize_key(key)
            typer.echo(f"{env_var_for_key(name)}={_format_value(getattr(config, name))}")
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("set")
def config_set(
    key_values: List[str] = typer.Argument(..., help="KEY=VALUE pairs (e.g. OCO_EMOJI=true)"),
) -> None:
    """Validate and persist one or more config values."""
    try:
        updates = {}
        for pair in key_values:
            if "=" not in pair:
                raise ConfigError(f"Invalid format: {pair}. Expected KEY=VALUE")
            key, value = pair.split("=", 1)
            updates[normalize_key(key)] = value

        try:
            stored = global_config.load_global_config()
        except global_config.GlobalConfigError as e:
            raise ConfigError(str(e))

        # Validate the whole file as it will be after the update
        validated = build_config({**stored, **updates})
        new_values = {key: _stored_value(getattr(validated, key)) for key in updates}

        # A stock default model follows the provider; a hand-picked one is kept
        if "ai_provider" in updates and "model" not in updates and stored.get("model") in _STOCK_MODELS:
            new_values["model"] = default_model_for_provider(validated.ai_provider)

        global_config.set_values(new_values)
        typer.echo("✓ Config successfully set")
    except (ConfigError, global_config.GlobalConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    try:
        config = load_config()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if global_config.is_configured():
        typer.echo(f"Current opencommit configuration ({global_config.get_config_file_path()}):")
    else:
        typer.echo("No configuration file found, showing defaults and environment overrides:")
    typer.echo()

    for key, value in config.model_dump().items():
        if key == "api_key":
            value = _mask(value) if value else "not set"
        typer.echo(f"  {env_var_for_key(key)}={_format_value(value)}")


@config_app.command("list-providers")
def config_list_providers() -> None:
    """List the supported AI providers and their default models."""
    for provider in AiProvider:
        if provider in NO_KEY_PROVIDERS:
            key_info = "no API key needed"
        else:
            key_info = f"API key: {API_KEY_ENV_VARS[provider]}"
        typer.echo(f"  {provider.value:<10} default model: {default_model_for_provider(provider)} ({key_info})")
