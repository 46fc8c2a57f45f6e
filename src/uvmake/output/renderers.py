"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic one-line renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.text import Text
from rich.tree import Tree

from uvmake.output.console import RULE, create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from uvmake.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _done(console: Console, message: str) -> None:
    console.print(Text(f"✅ {message}", style="uvm.ok"))


def _steps_panel(console: Console, title: str, steps: list[str]) -> None:
    body = Text("\n".join(f"→ {step}" for step in steps))
    console.print()
    console.print(Panel(body, title=title, title_align="left", expand=False))


def _render_removed(console: Console, removed: list[str]) -> None:
    for path in removed:
        console.print(Text(f"  - {path}", style="uvm.path"))


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _done(console, f"{result.op} complete")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(Text(f"❌ {message}", style="uvm.error"))
    if error is None:
        return
    for hint in error.detail.get("hints", []):
        console.print(Text(hint, style="uvm.hint"))
    if verbose:
        console.print(Text(f"  code: {error.code}", style="dim"))
        command = error.detail.get("command")
        if command:
            console.print(Text(f"  command: {' '.join(command)}", style="dim"))


def _render_help(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(RULE)
    console.print(Text("  Python Project Commands", style="uvm.heading"))
    console.print(RULE)
    for section, commands in result.data.get("sections", {}).items():
        console.print()
        console.print(Text(f"{section} Commands:", style="uvm.heading"))
        for cmd in commands:
            line = Text("  ")
            line.append(f"uvmake {cmd['name']:<14}", style="uvm.command")
            line.append(f" - {cmd['description']}")
            console.print(line)
    console.print()


def _render_init(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _done(console, f"Virtual environment created at {result.data['venv']}")
    _steps_panel(console, "Next steps", result.data.get("next_steps", []))


def _render_install(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _done(console, "Dependencies installed successfully")


def _render_dev(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _done(console, f"{result.data['module']} exited")


def _render_build(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    output = result.data.get("output", "dist/")
    _done(console, f"Build complete! Check the '{output}' folder for .whl and .tar.gz files")


def _render_clean(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    removed = result.data.get("removed", [])
    if verbose:
        _render_removed(console, removed)
    _done(console, "Cache cleaned")


def _render_obliviate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    if verbose:
        _render_removed(console, result.data.get("removed", []))
    _done(console, "Full cleanup complete")
    _steps_panel(console, "To set up again", result.data.get("next_steps", []))


def _render_python_version(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    data = result.data
    version = data["python"]
    pin_file = data["pin_file"]
    if data["source"] == "pin":
        console.print(Text(f"📌 Current Python version: {version} (from {pin_file})"))
    else:
        console.print(Text(f"⚠️  No {pin_file} file found", style="uvm.warning"))
        console.print(Text(f"📌 Using default: {version}"))
        console.print()
        console.print("To set a specific version:")
        for example in ("3.12", "3.13"):
            console.print(Text(f"  echo '{example}' > {pin_file}"))

    console.print()
    console.print("Available Python versions:")
    available = data.get("available")
    if available is None:
        console.print(Text("  Run 'uv python list' to see installed versions", style="uvm.hint"))
    else:
        for line in available:
            console.print(Text(line))


def _render_tree(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    node = result.data.get("tree")
    if node is None:
        return
    tree = Tree(Text(node["name"], style="uvm.dir"))
    _add_tree_children(tree, node)
    console.print(tree)


def _add_tree_children(tree: Tree, node: dict[str, Any]) -> None:
    for child in node.get("children", []):
        if child.get("dir"):
            branch = tree.add(Text(child["name"], style="uvm.dir"))
            _add_tree_children(branch, child)
        else:
            tree.add(Text(child["name"]))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "help": _render_help,
    "init": _render_init,
    "install": _render_install,
    "dev": _render_dev,
    "build": _render_build,
    "clean": _render_clean,
    "obliviate": _render_obliviate,
    "python-version": _render_python_version,
    "tree": _render_tree,
}
