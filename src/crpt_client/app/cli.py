from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from .api import CrptClient
from ..core.domain.enums import TimeUnit
from ..core.errors import CrptClientError
from ..infra.schemas import DocumentSchema


app = typer.Typer(help="Chestny ZNAK document API client")


class LogLevel(str, Enum):
    OFF = "OFF"
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


@app.callback()
def main(
    log_level: Annotated[
        Optional[LogLevel],
        typer.Option(
            "--log-level",
            case_sensitive=False,
            help="Set log level (OFF, CRITICAL, ERROR, WARNING, INFO, DEBUG). Default: OFF",
        ),
    ] = None,
) -> None:
    """Root command callback to configure logging if requested."""
    if log_level in (None, LogLevel.OFF):
        return

    level = logging.getLevelName(log_level.value)
    logger = logging.getLogger(__package__.split(".", 1)[0] if __package__ else "crpt_client")

    # Avoid stacking handlers when invoked repeatedly in one process
    has_stream = any(isinstance(h, logging.StreamHandler) for h in logger.handlers)
    if not has_stream:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s | %(name)s | %(message)s"))
        logger.addHandler(handler)

    logger.propagate = False
    logger.setLevel(level)


@app.command(help="Create an LP_INTRODUCE_GOODS document from a JSON file and print the API response.")
def create(
    document_path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Path to the document JSON file"),
    signature: str = typer.Option(..., "--signature", "-s", help="Detached signature in base64"),
    product_group: str = typer.Option(..., "--product-group", "-g", help="Product group (e.g., shoes, clothes)"),
    token: Optional[str] = typer.Option(None, "--token", "-t", help="Bearer token. Defaults to CRPT_CLIENT_AUTH_TOKEN"),
    limit: Optional[int] = typer.Option(None, "--limit", help="Requests allowed per time unit"),
    time_unit: Optional[TimeUnit] = typer.Option(None, "--time-unit", help="Rate limit window"),
) -> None:
    try:
        document = DocumentSchema.model_validate(json.loads(document_path.read_text(encoding="utf-8"))).to_domain()
    except (json.JSONDecodeError, ValidationError) as e:
        typer.echo(f"Invalid document: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        with CrptClient(time_unit=time_unit, request_limit=limit, auth_token=token) as client:
            result = client.create_document(document, signature, product_group)
    except CrptClientError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(result.body)


if __name__ == "__main__":  # pragma: no cover
    app()
