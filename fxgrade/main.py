"""CLI entry point for fxgrade."""

import asyncio
from typing import Optional

import typer
from rich.console import Console

from .config import API_BASE_URL
from .converter import (
    ConversionRequest,
    ConversionResult,
    InputReader,
    build_client,
    convert,
    parse_amount,
    parse_currency_code,
)
from .converter.session import run_session
from .exceptions import InputValidationError, MarkInputError, RateServiceError
from .grading import grade_marks
from .output import (
    format_connection_error,
    format_conversion,
    format_conversion_json,
    format_grade_json,
    format_grade_report,
    format_rate_not_found,
)
from .utils import setup_logging

app = typer.Typer(
    name="fxgrade",
    help="Convert currencies at live rates and grade lists of student marks.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    setup_logging(verbose)


async def _convert_once(request: ConversionRequest, api_url: str) -> ConversionResult | None:
    async with build_client() as client:
        return await convert(request, client, api_url)


@app.command("convert")
def convert_command(
    base: Optional[str] = typer.Option(
        None,
        "--from",
        help="Base currency code (e.g., USD). Prompts when omitted.",
    ),
    target: Optional[str] = typer.Option(
        None,
        "--to",
        help="Target currency code (e.g., EUR). Prompts when omitted.",
    ),
    amount: Optional[str] = typer.Option(
        None,
        "--amount",
        "-a",
        help="Amount in the base currency. Prompts when omitted.",
    ),
    output_format: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format for a one-shot conversion: table or json",
    ),
    api_url: str = typer.Option(
        API_BASE_URL,
        "--api-url",
        help="Exchange rate endpoint",
    ),
) -> None:
    """Convert between two currencies at the latest rate."""
    given = [value is not None for value in (base, target, amount)]
    if not any(given):
        reader = InputReader(console)
        asyncio.run(run_session(reader, console, err_console, api_url))
        return

    if not all(given):
        console.print("[red]--from, --to and --amount must be given together[/red]")
        raise typer.Exit(1)

    # Validate inputs
    try:
        base_code = parse_currency_code(base)
        target_code = parse_currency_code(target)
        amount_value = parse_amount(amount)
    except InputValidationError as e:
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(1)

    request = ConversionRequest(base=base_code, target=target_code, amount=amount_value)

    # Run conversion
    try:
        result = asyncio.run(_convert_once(request, api_url))
    except RateServiceError:
        format_connection_error(err_console)
        raise typer.Exit(1)

    if result is None:
        format_rate_not_found(console)
        raise typer.Exit(1)

    # Output result
    if output_format == "json":
        format_conversion_json(result, console)
    else:
        format_conversion(result, console)


@app.command("grade")
def grade_command(
    marks: str = typer.Argument(..., help="Comma-separated marks between 0 and 100 (e.g., '85, 90, 78')"),
    output_format: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format: table or json",
    ),
) -> None:
    """Compute total, average percentage and letter grade for a list of marks."""
    try:
        report = grade_marks(marks)
    except MarkInputError as e:
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(1)

    if output_format == "json":
        format_grade_json(report, console)
    else:
        format_grade_report(report, console)


@app.command()
def gui() -> None:
    """Open the desktop grade calculator."""
    from .gui.window import run_app

    raise typer.Exit(run_app())


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"fxgrade version {__version__}")


if __name__ == "__main__":
    app()
