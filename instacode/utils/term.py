
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.table import Table
import os

from ..core.diagnostics import Diagnostic, DiagnosticKind

console = Console(stderr=True, soft_wrap=True)

_KIND_LABELS = {
    DiagnosticKind.UNRECOGNIZED: "no reconocida",
    DiagnosticKind.MISSING_PREREQUISITE: "falta requisito",
    DiagnosticKind.SEMANTIC_WARNING: "advertencia",
    DiagnosticKind.STRUCTURAL_ERROR: "estructura",
}

MINIMAL = False


def _is_minimal() -> bool:
    # INSTACODE_MINIMAL_UI=1 overrides the module flag
    env = os.environ.get('INSTACODE_MINIMAL_UI')
    if env is not None:
        return env.strip() in ('1', 'true', 'yes', 'on')
    return MINIMAL


def print_stage(step: int, total: int, message: str):
    """Print a staged progress line such as ``[1/3] Leyendo instrucciones``."""
    if _is_minimal():
        console.print(f"[{step}/{total}] {message}", markup=False)
    else:
        console.print(f"[cyan]●[/cyan] [bold]{step}/{total}[/bold] {escape(message)}")


def print_info(message: str):
    if _is_minimal():
        return
    console.print(f"[yellow]Info:[/yellow] {escape(message)}")


def print_error(message: str):
    if _is_minimal():
        console.print(f"[ERROR] {message}", markup=False)
        return
    console.print(f"[red]Error:[/red] {escape(message)}")


def print_warning(message: str):
    if _is_minimal():
        console.print(f"[WARN] {message}", markup=False)
        return
    console.print(f"[#9b59b6]Advertencia:[/#9b59b6] {escape(message)}")


def print_success(message: str):
    if _is_minimal():
        console.print(f"[OK] {message}", markup=False)
        return
    console.print(f"[green]Listo:[/green] {escape(message)}")


def print_issues(diagnostics: List[Diagnostic]):
    """Per-line problems of a translation: a table, or one line each in minimal mode."""
    if not diagnostics:
        return
    if _is_minimal():
        for diag in diagnostics:
            tag = "ERROR" if diag.fails else "WARN"
            console.print(f"[{tag}] {diag.format()}", markup=False)
        return

    table = Table(title="Problemas encontrados", show_lines=False)
    table.add_column("Línea", justify="right", style="cyan")
    table.add_column("Tipo")
    table.add_column("Mensaje")
    for diag in diagnostics:
        kind = _KIND_LABELS.get(diag.kind, diag.kind.value)
        style = "red" if diag.fails else "#9b59b6"
        line = str(diag.line) if diag.line > 0 else "-"
        table.add_row(line, f"[{style}]{kind}[/{style}]", escape(diag.message))
    console.print(table)
