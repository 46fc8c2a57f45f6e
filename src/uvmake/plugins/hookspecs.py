"""Pluggy hook specifications for uvmake lifecycle events."""

from __future__ import annotations

import pluggy

PROJECT_NAME = "uvmake"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class UvmakeHookSpec:
    """Hook specifications for the uvmake plugin system."""

    @hookspec
    def post_command(self, command: str, ok: bool, project_root: str) -> None:
        """Called after a shortcut command finishes, successfully or not."""
