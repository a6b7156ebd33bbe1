"""Interactive conversion loop."""

import logging

from rich.console import Console

from ..config import API_BASE_URL
from ..exceptions import RateServiceError
from ..output.formatters import format_connection_error, format_conversion, format_rate_not_found
from .calculator import convert
from .fetcher import build_client
from .input_reader import InputReader

logger = logging.getLogger(__name__)


async def run_session(
    reader: InputReader,
    console: Console,
    err_console: Console,
    api_url: str = API_BASE_URL,
) -> int:
    """
    Run conversions until the user opts out.

    Each iteration awaits its rate request before prompting again, so at
    most one request is in flight. Connectivity failures and missing rates
    are reported and the loop carries on.

    Returns:
        Number of successful conversions.
    """
    console.print("[bold cyan]===== Welcome to the Real-Time Currency Converter =====[/bold cyan]")
    console.print(" (Powered by Frankfurter.app)")

    completed = 0
    async with build_client() as client:
        try:
            while True:
                request = reader.read_request()

                console.print("\n[cyan]Fetching real-time exchange rate...[/cyan]")
                try:
                    result = await convert(request, client, api_url)
                except RateServiceError as e:
                    logger.debug("Conversion skipped: %s", e)
                    format_connection_error(err_console)
                else:
                    if result is None:
                        format_rate_not_found(console)
                    else:
                        format_conversion(result, console)
                        completed += 1

                if not reader.confirm_continue():
                    break
                console.print()
        except EOFError:
            console.print()

    console.print("Thank you for using the Currency Converter! Goodbye.")
    return completed
