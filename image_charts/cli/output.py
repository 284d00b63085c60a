"""Console output helpers for the image-charts CLI.

Use these for user-facing messages; use the module loggers for diagnostics.
Results meant to be piped (URLs, data URIs) go through ``plain`` so they stay
free of emoji prefixes. Errors and warnings go to stderr so they never mix
with a piped result.
"""

from __future__ import annotations

import typer


def success(message: str, *, prefix: bool = True) -> None:
    """Display a success message in green with checkmark emoji.

    Args:
        message: The success message to display
        prefix: Whether to include the checkmark emoji prefix (default: True)

    Example:
        success("Chart written to chart.png")
        # Output: ✅ Chart written to chart.png
    """
    formatted = f"✅ {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.GREEN)


def error(message: str, *, prefix: bool = True, err: bool = True) -> None:
    """Display an error message in red with cross emoji, on stderr by default."""
    formatted = f"❌ {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.RED, err=err)


def warning(message: str, *, prefix: bool = True, err: bool = True) -> None:
    """Display a warning in yellow with warning emoji, on stderr by default.

    Example:
        warning("icac is set but no usable secret was given")
        # Output: ⚠️  icac is set but no usable secret was given
    """
    formatted = f"⚠️  {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.YELLOW, err=err)


def plain(message: str) -> None:
    """Print a result (URL, data URI) on stdout exactly as given."""
    typer.echo(message)
