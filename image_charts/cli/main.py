from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import requests
import typer
import yaml

from .. import __version__
from ..builder import ImageCharts
from ..core.chart_spec import load_chart_spec
from ..core.config import Settings, get_settings
from ..core.logging_config import get_logger, setup_logging
from ..errors import ImageChartsError
from ..parameters import ACCOUNT_ID_KEY
from . import output as cli_output

app = typer.Typer(help="Image-Charts CLI: build chart URLs and download chart images")

logger = get_logger(__name__)

T = TypeVar("T")


@app.callback()
def callback(
    ctx: typer.Context,
    json_logs: bool = typer.Option(False, "--json-logs", help="Output logs in JSON format"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
    log_file: str | None = typer.Option(None, "--log-file", help="Optional rotating JSON log file"),
    secret: str | None = typer.Option(
        None, help="Enterprise secret used to sign URLs (default: IMAGE_CHARTS_SECRET)"
    ),  # noqa: B008
    protocol: str | None = typer.Option(None, help="URL scheme (default: https)"),  # noqa: B008
    host: str | None = typer.Option(None, help="API host (default: image-charts.com)"),  # noqa: B008
    port: int | None = typer.Option(None, min=1, max=65535, help="API port (default: 443)"),  # noqa: B008
    timeout: float | None = typer.Option(
        None, min=1.0, help="Connect/read timeout in milliseconds (default: 5000)"
    ),  # noqa: B008
    user_agent: str | None = typer.Option(None, help="Override the user-agent header"),  # noqa: B008
) -> None:
    """Configure logging and the API connection shared by all commands.

    Connection options default to the IMAGE_CHARTS_* environment variables (or .env).
    """
    setup_logging(json_output=json_logs, log_level=log_level, log_file=log_file)

    try:
        settings = get_settings()
    except ValueError as e:
        cli_output.error(f"Invalid configuration: {e}")
        raise typer.Exit(code=1) from None

    if secret is not None:
        settings.secret = secret
    if protocol is not None:
        settings.protocol = protocol
    if host is not None:
        settings.host = host
    if port is not None:
        settings.port = port
    if timeout is not None:
        settings.timeout = timeout
    if user_agent is not None:
        settings.user_agent = user_agent

    ctx.obj = settings
    logger.debug("CLI initialized", extra={
        "json_logs": json_logs,
        "log_level": log_level,
        "host": settings.host,
    })


def _parse_params(params: list[str] | None) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for raw in params or []:
        key, sep, value = raw.partition("=")
        key = key.strip()
        if not sep or not key:
            cli_output.error(f"Invalid --param '{raw}'. Use KEY=VALUE, e.g. --param cht=p")
            raise typer.Exit(code=1)
        parsed[key] = value
    return parsed


def _build_chart(settings: Settings, spec: str | None, params: list[str] | None) -> ImageCharts:
    try:
        chart = ImageCharts.from_settings(settings)
    except ValueError as e:
        cli_output.error(f"Invalid configuration: {e}")
        raise typer.Exit(code=1) from None

    if spec:
        try:
            chart = chart.with_parameters(load_chart_spec(spec))
        except FileNotFoundError:
            cli_output.error(f"Chart spec not found: {spec}")
            raise typer.Exit(code=1) from None
        except yaml.YAMLError as e:
            cli_output.error(f"Invalid YAML in chart spec: {e}")
            raise typer.Exit(code=1) from None
        except ValueError as e:
            cli_output.error(f"Invalid chart spec: {e}")
            raise typer.Exit(code=1) from None

    # --param values override the spec file
    chart = chart.with_parameters(_parse_params(params))

    if ACCOUNT_ID_KEY in chart.query and not chart.signed:
        cli_output.warning(
            f"{ACCOUNT_ID_KEY} is set but no usable secret was given; the URL will not be signed. "
            "Pass --secret or set IMAGE_CHARTS_SECRET."
        )
    return chart


def _call_api(chart: ImageCharts, action: Callable[[], T]) -> T:
    try:
        return action()
    except ImageChartsError as e:
        cli_output.error(f"Image-Charts API error [{e.validation_code}] (HTTP {e.status_code}): {e.message}")
        raise typer.Exit(code=1) from None
    except requests.exceptions.Timeout:
        cli_output.error(f"Request to {chart.host} timed out after {chart.timeout:g} ms")
        raise typer.Exit(code=1) from None
    except requests.exceptions.RequestException as e:
        logger.exception("Chart request failed", extra={"host": chart.host})
        cli_output.error(f"Request failed: {e}")
        raise typer.Exit(code=1) from None


@app.command()
def version() -> None:
    """Print version."""
    typer.echo(__version__)


@app.command()
def url(
    ctx: typer.Context,
    param: list[str] | None = typer.Option(
        None, "--param", "-p", help="Chart parameter as KEY=VALUE (repeatable)"
    ),  # noqa: B008
    spec: str | None = typer.Option(None, help="YAML chart spec file"),  # noqa: B008
) -> None:
    """Print the chart URL (signed when --secret and icac are set)."""
    chart = _build_chart(ctx.obj, spec, param)
    cli_output.plain(chart.to_url())


@app.command()
def download(
    ctx: typer.Context,
    output: Path = typer.Option(..., "--output", "-o", help="Destination file for the chart image"),  # noqa: B008
    param: list[str] | None = typer.Option(
        None, "--param", "-p", help="Chart parameter as KEY=VALUE (repeatable)"
    ),  # noqa: B008
    spec: str | None = typer.Option(None, help="YAML chart spec file"),  # noqa: B008
) -> None:
    """Download the chart image and write it to --output.

    Example:
        image-charts download -o /tmp/chart.png -p cht=bvg -p chs=300x300 -p chd=a:60,40
    """
    chart = _build_chart(ctx.obj, spec, param)

    try:
        _call_api(chart, lambda: chart.to_file(output))
    except OSError as e:
        cli_output.error(f"Failed to write {output}: {e}")
        raise typer.Exit(code=1) from None

    cli_output.success(f"Chart written to {output}")


@app.command("data-uri")
def data_uri(
    ctx: typer.Context,
    param: list[str] | None = typer.Option(
        None, "--param", "-p", help="Chart parameter as KEY=VALUE (repeatable)"
    ),  # noqa: B008
    spec: str | None = typer.Option(None, help="YAML chart spec file"),  # noqa: B008
) -> None:
    """Download the chart and print it as a base64 data URI."""
    chart = _build_chart(ctx.obj, spec, param)
    cli_output.plain(_call_api(chart, chart.to_data_uri))
