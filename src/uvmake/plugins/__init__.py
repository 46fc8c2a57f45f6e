"""Plugin system (pluggy).

Plugins observe shortcut commands through lifecycle hooks.  They are
discovered from the ``uvmake.plugins`` entry-point group and from
single-file plugins in ``<project>/.uvmake/plugins/``.
"""

from uvmake.plugins.hookspecs import hookimpl, hookspec

__all__ = ["hookimpl", "hookspec"]
