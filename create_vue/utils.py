"""Shared utility functions for create-vue.

Provides package-name validation, package-manager detection and command
formatting, JSON I/O, file-system helpers, and Rich-based console output.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Package names
# ---------------------------------------------------------------------------

_PACKAGE_NAME_RE = re.compile(r"(?:@[a-z0-9\-*~][a-z0-9\-*._~]*/)?[a-z0-9\-~][a-z0-9\-._~]*")


def is_valid_package_name(project_name: str) -> bool:
    """Return ``True`` if *project_name* is usable as a ``package.json`` name."""
    return _PACKAGE_NAME_RE.fullmatch(project_name) is not None


def to_valid_package_name(project_name: str) -> str:
    """Convert an arbitrary project name into a valid package name.

    Examples::

        to_valid_package_name("My Project") -> "my-project"
        to_valid_package_name("_private")   -> "private"
    """
    name = project_name.strip().lower()
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"^[._]", "", name)
    return re.sub(r"[^a-z0-9-~]+", "-", name)


# ---------------------------------------------------------------------------
# Package managers
# ---------------------------------------------------------------------------

PACKAGE_MANAGERS: tuple[str, ...] = ("npm", "yarn", "pnpm")


def detect_package_manager(npm_execpath: str | None) -> str:
    """Pick the package manager that launched us: pnpm > yarn > npm.

    *npm_execpath* is the value of the ``npm_execpath`` environment variable,
    passed in by the caller rather than read here.
    """
    execpath = npm_execpath or ""
    if "pnpm" in execpath:
        return "pnpm"
    if "yarn" in execpath:
        return "yarn"
    return "npm"


def get_command(package_manager: str, script_name: str) -> str:
    """Format the shell command that runs *script_name* with *package_manager*.

    Examples::

        get_command("yarn", "install") -> "yarn"
        get_command("pnpm", "install") -> "pnpm install"
        get_command("npm", "dev")      -> "npm run dev"
        get_command("yarn", "dev")     -> "yarn dev"
    """
    if script_name == "install":
        return "yarn" if package_manager == "yarn" else f"{package_manager} install"

    if package_manager == "npm":
        return f"npm run {script_name}"
    return f"{package_manager} {script_name}"


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as two-space indented JSON with a trailing newline.

    Parent directories are created automatically.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=2, ensure_ascii=False)
    file_path.write_text(content + "\n", encoding="utf-8")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def can_safely_overwrite(directory: str | Path) -> bool:
    """Return ``True`` if *directory* is missing or empty.

    Anything else needs the user's confirmation before it is emptied.
    """
    dir_path = Path(directory)
    if not dir_path.exists():
        return True
    return dir_path.is_dir() and not any(dir_path.iterdir())


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
