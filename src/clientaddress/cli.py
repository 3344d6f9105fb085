"""Typer-based command line interface for address lookups.

``clientaddress get`` prints what the spreadsheet function would return;
``clientaddress list`` shows every address of a client with its types, which
helps when choosing a ``--type`` value.  Credentials default to the
environment variables named in the configuration.

Exit codes
----------
0 success
2 missing parameter
3 network error
4 configuration error
5 API error (non-success HTTP status)
6 invalid response
7 no address found
8 unknown field
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from .api.client import AddressApiClient, Credentials
from .config import ConfigModel, load_config
from .formula import get_client_address
from .render.html_text import html_to_plain_text
from .select.selector import default_address
from .utils.errors import (
    ApiError,
    ClientAddressError,
    InvalidResponseError,
    MissingParameterError,
    NetworkError,
    NotFoundError,
    UnknownFieldError,
)
from .utils.logging import configure_logging

app = typer.Typer(
    name="clientaddress",
    help="Fetch client addresses from the API. Use 'clientaddress get' to resolve one value.",
)

EXIT_CODES: dict[type[ClientAddressError], int] = {
    MissingParameterError: 2,
    NetworkError: 3,
    ApiError: 5,
    InvalidResponseError: 6,
    NotFoundError: 7,
    UnknownFieldError: 8,
}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _exit_for(exc: ClientAddressError) -> None:
    _safe_exit(EXIT_CODES.get(type(exc), 1), str(exc))


def _load(config_path: Path | None, verbose: bool) -> ConfigModel:
    try:
        cfg = load_config(config_path)
    except (ValidationError, OSError, ValueError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    configure_logging("DEBUG" if verbose else cfg.logging.level)
    return cfg


def _credentials(cfg: ConfigModel, user: str | None, password: str | None) -> Credentials:
    """Merge command line credentials over those found in the environment."""

    env_password = cfg.credentials.password
    return Credentials(
        user or cfg.credentials.user or "",
        password or (env_password.get_secret_value() if env_password else ""),
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.callback()
def main() -> None:
    """Entry point for the clientaddress command group."""
    pass


ClientIdArg = typer.Argument(..., help="Client identifier in the upstream system")
UserOpt = typer.Option(None, "--user", "-u", help="API user (defaults to $CLIENTADDRESS_USER)")
PasswordOpt = typer.Option(
    None, "--password", "-p", help="API password (defaults to $CLIENTADDRESS_PASSWORD)"
)
ConfigOpt = typer.Option(None, "--config", help="YAML config to override defaults")
VerboseOpt = typer.Option(False, "--verbose", "-v", help="Log requests to stderr")


@app.command()
def get(  # noqa: PLR0913
    client_id: str = ClientIdArg,
    address_type: Optional[str] = typer.Option(  # noqa: B008
        None, "--type", "-t", help="Address type to prefer, e.g. 'shipping'"
    ),
    field: Optional[str] = typer.Option(  # noqa: B008
        None, "--field", "-f", help="Return only this field, e.g. 'postal_code'"
    ),
    user: Optional[str] = UserOpt,
    password: Optional[str] = PasswordOpt,
    config_path: Optional[Path] = ConfigOpt,
    verbose: bool = VerboseOpt,
) -> None:
    """Print the rendered address of CLIENT_ID, or a single field of it."""

    cfg = _load(config_path, verbose)
    try:
        value = get_client_address(
            _credentials(cfg, user, password),
            client_id,
            address_type,
            field,
            cfg=cfg,
        )
    except ClientAddressError as exc:
        _exit_for(exc)
    typer.echo(value)


@app.command("list")
def list_addresses(
    client_id: str = ClientIdArg,
    user: Optional[str] = UserOpt,
    password: Optional[str] = PasswordOpt,
    config_path: Optional[Path] = ConfigOpt,
    verbose: bool = VerboseOpt,
) -> None:
    """List every address of CLIENT_ID with its types; '*' marks the default."""

    cfg = _load(config_path, verbose)
    credentials = _credentials(cfg, user, password)
    try:
        missing = credentials.missing()
        if missing:
            raise MissingParameterError(missing)
        with AddressApiClient(cfg) as client:
            addresses = client.fetch_addresses(client_id, credentials)
        if not addresses:
            raise NotFoundError(client_id)
    except ClientAddressError as exc:
        _exit_for(exc)

    default = default_address(addresses)
    for idx, record in enumerate(addresses):
        marker = "*" if record is default else " "
        types = ",".join(record.types) or "-"
        first_line = html_to_plain_text(record.rendered_html).split("\n", 1)[0]
        typer.echo(f"{idx} {marker} {types}\t{first_line}")
