import csv
import io
import json
import logging
import os
from typing import List, Optional

import typer

from bms.book import InvalidBookError, screen_book
from bms.config import settings
from bms.ui_helpers import print_check_results, print_screen_result, print_summary, set_output_mode
from bms.validators import ISBNValidator

logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.WARNING))

app = typer.Typer(help=f"{settings.app_name} CLI")


@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log rejection reasons"),
):
    """Global CLI options (output mode, verbosity)."""
    if output:
        set_output_mode(output)
    if verbose or settings.debug:
        logging.getLogger("bms").setLevel(logging.DEBUG)


def _check(isbns: List[str], keep_check_x: Optional[bool]) -> List[dict]:
    results = []
    for raw in isbns:
        variant = ISBNValidator.classify(raw, keep_check_x)
        results.append({
            "input": raw,
            "variant": variant.value,
            "valid": ISBNValidator.is_valid_isbn(raw, keep_check_x),
        })
    return results


def _read_isbns(file_path: str) -> List[str]:
    with open(file_path, "r", encoding="utf-8") as f:
        content = f.read().strip()
    header = [col.strip() for col in content.split("\n", 1)[0].split(",")]
    if file_path.endswith(".csv") or "isbn" in header or "ISBN" in header:
        reader = csv.DictReader(io.StringIO(content))
        fields = [col.strip() for col in reader.fieldnames or []]
        if "isbn" not in fields and "ISBN" not in fields:
            raise ValueError("CSV has no isbn column")
        column = "isbn" if "isbn" in fields else "ISBN"
        reader.fieldnames = fields
        return [row[column].strip() for row in reader if (row.get(column) or "").strip()]
    return [line.strip() for line in content.split("\n") if line.strip()]


@app.command("check")
def cli_check(
    isbns: List[str] = typer.Argument(..., help="One or more ISBNs, hyphens and spaces allowed"),
    digits_only: bool = typer.Option(False, "--digits-only", help="Drop a trailing 'X' like every other non-digit"),
):
    """Validate ISBN-10 / ISBN-13 checksums."""
    keep_check_x = False if digits_only else None
    results = _check(isbns, keep_check_x)
    print_check_results(results)
    if not all(r["valid"] for r in results):
        raise typer.Exit(code=1)


@app.command("batch-check")
def cli_batch_check(
    file_path: str,
    digits_only: bool = typer.Option(False, "--digits-only", help="Drop a trailing 'X' like every other non-digit"),
):
    """Validate ISBNs from a file (one per line, or CSV with an isbn column)."""
    if not os.path.exists(file_path):
        print(f"File not found: {file_path}")
        raise typer.Exit(code=1)
    try:
        isbns = _read_isbns(file_path)
    except (OSError, ValueError, csv.Error) as e:
        print(f"Could not read {file_path}: {e}")
        raise typer.Exit(code=1)
    if not isbns:
        print(f"No ISBNs found in {file_path}")
        raise typer.Exit(code=1)

    results = _check(isbns, False if digits_only else None)
    print_check_results(results)
    valid = sum(1 for r in results if r["valid"])
    print_summary(valid, len(results) - valid)
    if valid != len(results):
        raise typer.Exit(code=1)


@app.command("screen")
def cli_screen(file_path: str):
    """Screen book records from a JSON file (object or list) before saving."""
    if not os.path.exists(file_path):
        print(f"File not found: {file_path}")
        raise typer.Exit(code=1)
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        print(f"Could not read {file_path}: {e}")
        raise typer.Exit(code=1)

    records = data if isinstance(data, list) else [data]
    rejected = 0
    for record in records:
        if not isinstance(record, dict):
            print_screen_result("", "Book data is required.", [])
            rejected += 1
            continue
        title = str(record.get("title") or "")
        try:
            book = screen_book(record)
            print_screen_result(book.title, None, [])
        except InvalidBookError as e:
            print_screen_result(title, e.message, e.errors)
            rejected += 1
    if rejected:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
