"""Output formatters for conversions and grade reports."""

import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..config import AMOUNT_DECIMALS, RATE_DECIMALS
from ..converter.models import ConversionResult
from ..grading.calculator import GradeReport, format_percentage


GRADE_COLORS = {
    "A": "green",
    "B": "green",
    "C": "yellow",
    "D": "yellow",
    "F": "red",
}


def format_rate_line(result: ConversionResult) -> str:
    """Rate: 1 USD = 0.9200 EUR"""
    request = result.request
    return f"Rate: 1 {request.base} = {result.rate:.{RATE_DECIMALS}f} {request.target}"


def format_amount_line(result: ConversionResult) -> str:
    """Amount: 100.00 USD = 92.00 EUR"""
    request = result.request
    return (
        f"Amount: {request.amount:.{AMOUNT_DECIMALS}f} {request.base} = "
        f"{result.converted:.{AMOUNT_DECIMALS}f} {request.target}"
    )


def format_conversion(result: ConversionResult, console: Console) -> None:
    """Print a conversion result block."""
    console.print("\n[bold]--- Result ---[/bold]")
    console.print(format_rate_line(result), markup=False, highlight=False)
    console.print(format_amount_line(result), markup=False, highlight=False)
    console.print("--------------")


def format_conversion_json(result: ConversionResult, console: Console) -> None:
    """Print a conversion result as JSON."""
    console.print_json(json.dumps(result.to_dict()))


def format_rate_not_found(console: Console) -> None:
    console.print("[yellow]Sorry, couldn't find a rate for one of those currencies.[/yellow]")
    console.print("Please check the 3-letter codes and try again.")


def format_connection_error(console: Console) -> None:
    console.print("[red]Error: Could not connect to the currency service.[/red]")
    console.print("Please check your internet connection and try again.")


def format_grade_report(report: GradeReport, console: Console) -> None:
    """Print a grade report as a rich table."""
    color = GRADE_COLORS.get(report.grade, "white")

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="dim")
    table.add_column("Value")

    table.add_row("Marks", ", ".join(str(mark) for mark in report.marks))
    table.add_row("Total Marks", str(report.total))
    table.add_row("Average Percentage", format_percentage(report.average))
    table.add_row("Final Grade", f"[bold {color}]{report.grade}[/bold {color}]")

    header = Text("Student Grade Report", style="bold cyan")
    console.print(Panel(table, title=header, border_style="cyan"))


def format_grade_json(report: GradeReport, console: Console) -> None:
    """Print a grade report as JSON."""
    console.print_json(json.dumps(report.to_dict()))
