import os
import json
from typing import List, Dict, Any

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "BMS_CLI_OUTPUT"

_console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode


def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()


def print_check_results(results: List[Dict[str, Any]]) -> None:
    """Print ISBN check results in the current output mode.
    - plain: '<input>: valid (ISBN-13)' or '<input>: invalid' lines
    - json: array of {input, variant, valid}
    - rich: table
    """
    mode = get_output_mode()

    if not results:
        print("No identifiers to check.")
        return

    if mode == "json":
        print(json.dumps(results, ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="ISBN check", show_lines=True, header_style="bold cyan")
        table.add_column("Input", style="magenta", no_wrap=True)
        table.add_column("Variant", style="white")
        table.add_column("Result", style="white")
        for r in results:
            verdict = "[green]valid[/]" if r["valid"] else "[red]invalid[/]"
            table.add_row(escape(r["input"]), r["variant"], verdict)
        _console.print(table)
    else:
        for r in results:
            if r["valid"]:
                print(f"{r['input']}: valid ({r['variant']})")
            else:
                print(f"{r['input']}: invalid")


def print_summary(valid: int, invalid: int) -> None:
    mode = get_output_mode()
    if mode == "json":
        return
    if mode == "rich":
        content = f"[green]{valid} valid[/]\n[red]{invalid} invalid[/]"
        _console.print(Panel.fit(content, title="Summary", border_style="green" if invalid == 0 else "yellow"))
    else:
        print(f"Checked {valid + invalid}: {valid} valid, {invalid} invalid")


def print_screen_result(title: str, message: str | None, errors: List[str]) -> None:
    mode = get_output_mode()
    if mode == "json":
        payload = {"title": title, "accepted": message is None, "message": message, "errors": errors}
        print(json.dumps(payload, ensure_ascii=False))
        return
    if message is None:
        if mode == "rich":
            _console.print(f"[green]Accepted[/]: {escape(title)}")
        else:
            print(f"Accepted: {title}")
        return
    if mode == "rich":
        _console.print(f"[red]Rejected[/]: {escape(message)}")
        for err in errors:
            _console.print(f"  - {escape(err)}")
    else:
        print(f"Rejected: {message}")
        for err in errors:
            print(f"  - {err}")
