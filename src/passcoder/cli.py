"""passcoder: random password and passcode generator for the terminal.

Commands
--------
  screen    Interactive single screen (the default when no command is given)
  generate  Generate a new password or passcode and reveal it
  show      Show the stored password and passcode (masked unless --reveal)
  copy      Copy a value to the clipboard and open system settings
  clear     Forget the stored password and passcode
  info      Show settings file location and slot states
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from . import __version__
from .config import configure_logging, get_store_path
from .errors import SlotEmptyError
from .handoff import SystemClipboard, SystemSettingsLauncher
from .models import Notice, Slot, SlotState, SlotView, Snapshot
from .service import CredentialService
from .store import CredentialStore, JsonSettingsFile

# ---------------------------------------------------------------------------
# App & consoles
# ---------------------------------------------------------------------------

_THEME = Theme(
    {
        "success": "bold green",
        "warning": "bold yellow",
        "danger": "bold red",
        "muted": "dim",
        "label": "bold red",
        "revealed": "bold black on white",
    }
)

console = Console(theme=_THEME)
err = Console(stderr=True, theme=_THEME)

app = typer.Typer(
    name="passcoder",
    help="[bold green]passcoder[/bold green]: random password and passcode generation.",
    invoke_without_command=True,
    pretty_exceptions_show_locals=False,
    rich_markup_mode="rich",
    add_completion=False,
)

_DESCRIPTION = (
    "Randomized password and passcode generation with copy and save. "
    "Tap a masked value to regenerate it, copy it to hand off to system settings."
)

# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _service(ctx: typer.Context) -> CredentialService:
    store = CredentialStore(JsonSettingsFile(ctx.obj))
    service = CredentialService(store, SystemClipboard(), SystemSettingsLauncher())
    service.start()
    return service


def _slot_line(view: SlotView) -> Text:
    label = f"{view.slot.value.capitalize()}: "
    line = Text()
    if view.state is SlotState.EMPTY:
        line.append(label, style="label")
        line.append("Generate", style="italic yellow")
    elif view.state is SlotState.HIDDEN:
        line.append(label + view.display, style="label")
    else:
        line.append(label, style="label")
        line.append(f" {view.display} ", style="revealed")
    return line


def _toggle_hint(view: SlotView) -> str:
    name = view.slot.value.capitalize()
    if view.state is SlotState.REVEALED:
        return f"Hide {name} / Tap Dots to Regenerate"
    return f"Show {name}"


def _render(snapshot: Snapshot) -> None:
    body = Text()
    for slot in Slot:
        body.append_text(_slot_line(snapshot[slot]))
        body.append("\n")
    console.print(
        Panel(body, title="[bold green]Rando-Passcoder[/bold green]", border_style="green", expand=False)
    )


def _render_notice(notice: Notice) -> None:
    console.print(
        Panel(notice.message, title=f"[warning]{notice.title}[/warning]", border_style="yellow", expand=False)
    )


def _copy(service: CredentialService, slot: Slot) -> None:
    try:
        notice = service.copy_and_handoff(slot)
    except SlotEmptyError as exc:
        err.print(f"[warning]{exc}[/warning] Run [bold]passcoder generate {slot.value}[/bold] first.")
        raise typer.Exit(1) from exc
    _render_notice(notice)


# ---------------------------------------------------------------------------
# Global options
# ---------------------------------------------------------------------------


@app.callback()
def main_callback(
    ctx: typer.Context,
    store: Annotated[
        Optional[Path],
        typer.Option("--store", help="Custom settings file path.", show_default=False),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-V", help="Log debug output to stderr.")] = False,
) -> None:
    configure_logging(verbose)
    ctx.obj = get_store_path(store)
    if ctx.invoked_subcommand is None:
        screen(ctx)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

_ACTIONS = {
    "p": "tap password",
    "c": "tap passcode",
    "sp": "show/hide password",
    "sc": "show/hide passcode",
    "cp": "copy & change password",
    "cc": "copy & change passcode",
    "q": "quit",
}


def _render_actions(snapshot: Snapshot) -> None:
    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Action")
    for key, label in _ACTIONS.items():
        if key == "sp":
            label = _toggle_hint(snapshot[Slot.PASSWORD])
        elif key == "sc":
            label = _toggle_hint(snapshot[Slot.PASSCODE])
        table.add_row(key, label)
    console.print(table)


@app.command()
def screen(ctx: typer.Context) -> None:
    """Interactive single screen; values are saved on quit."""
    service = _service(ctx)
    console.print(f"[muted]{_DESCRIPTION}[/muted]\n")

    try:
        while True:
            snapshot = service.snapshot()
            _render(snapshot)
            _render_actions(snapshot)
            try:
                choice = Prompt.ask("Action", choices=list(_ACTIONS), show_choices=False, console=console)
            except (EOFError, KeyboardInterrupt):
                break
            if choice == "q":
                break

            slot = Slot.PASSWORD if choice.endswith("p") else Slot.PASSCODE
            try:
                if choice in ("p", "c"):
                    service.tap(slot)
                elif choice.startswith("s"):
                    service.toggle_visibility(slot)
                else:
                    _render_notice(service.copy_and_handoff(slot))
            except SlotEmptyError as exc:
                console.print(f"[warning]{exc}[/warning] Tap it to generate one.")
    finally:
        saved = service.suspend()
    if saved:
        console.print("[muted]Saved.[/muted]")


@app.command()
def generate(
    ctx: typer.Context,
    slot: Annotated[Slot, typer.Argument(help="What to generate.")],
    copy: Annotated[bool, typer.Option("--copy", "-c", help="Copy it and open system settings.")] = False,
) -> None:
    """Generate a new password or passcode, save it and show it."""
    service = _service(ctx)
    service.generate(slot)
    _render(service.snapshot())
    if copy:
        _copy(service, slot)


@app.command()
def show(
    ctx: typer.Context,
    reveal: Annotated[bool, typer.Option("--reveal", "-r", help="Display values in plain text.")] = False,
) -> None:
    """Show the stored password and passcode."""
    service = _service(ctx)
    if reveal:
        for slot in Slot:
            if service.state(slot) is SlotState.HIDDEN:
                service.toggle_visibility(slot)
    _render(service.snapshot())


@app.command()
def copy(
    ctx: typer.Context,
    slot: Annotated[Slot, typer.Argument(help="What to copy.")],
) -> None:
    """Copy a stored value to the clipboard and open system settings."""
    _copy(_service(ctx), slot)


@app.command()
def clear(
    ctx: typer.Context,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation prompt.")] = False,
) -> None:
    """Forget the stored password and passcode."""
    if not yes:
        confirmed = Confirm.ask(
            "  Clear the stored password and passcode? [muted]This cannot be undone.[/muted]",
            default=False,
            console=console,
        )
        if not confirmed:
            raise typer.Exit(0)

    store = CredentialStore(JsonSettingsFile(ctx.obj))
    if not store.clear():
        err.print("[danger]Could not clear the settings file.[/danger]")
        raise typer.Exit(1)
    console.print("[success]Stored password and passcode cleared.[/success]")


@app.command()
def info(ctx: typer.Context) -> None:
    """Show settings file location and slot states."""
    path: Path = ctx.obj
    snapshot = _service(ctx).snapshot()

    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Version", __version__)
    table.add_row("Settings file", str(path))
    table.add_row("File exists", "[green]yes[/green]" if path.exists() else "[red]no[/red]")
    table.add_row("Password", snapshot.password.state.value)
    table.add_row("Passcode", snapshot.passcode.state.value)

    console.print(Panel(table, title="[bold green]passcoder info[/bold green]", border_style="green", expand=False))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main() -> None:
    app()


if __name__ == "__main__":
    main()
