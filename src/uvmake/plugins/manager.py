"""Plugin loading and ``post_command`` dispatch.

Plugins come from two places: distributions advertising the
``uvmake.plugins`` entry point group, and single-file modules in the
project's ``.uvmake/plugins/`` directory.  A plugin can never fail a
command; problems surface as log records or result warnings.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from types import ModuleType

import pluggy

from uvmake.plugins.hookspecs import PROJECT_NAME, UvmakeHookSpec

ENTRY_POINT_GROUP = "uvmake.plugins"
LOCAL_MODULE_PREFIX = "uvmake_local_plugin_"

logger = logging.getLogger(__name__)


def _is_hook_class(obj: object) -> bool:
    """True for a class with at least one public ``@hookimpl`` method."""
    if not inspect.isclass(obj):
        return False
    marker = f"{PROJECT_NAME}_impl"
    return any(
        getattr(getattr(obj, attr, None), marker, None)
        for attr in dir(obj)
        if not attr.startswith("_")
    )


def _import_file(py_file: Path, module_name: str) -> ModuleType | None:
    spec = importlib.util.spec_from_file_location(module_name, py_file)
    if spec is None or spec.loader is None:
        logger.warning("Cannot import plugin file %s", py_file)
        return None
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        sys.modules.pop(module_name, None)
        logger.warning("Plugin file %s failed to import", py_file, exc_info=True)
        return None
    return module


class PluginManager:
    """Thin wrapper over :class:`pluggy.PluginManager` for uvmake hooks."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(UvmakeHookSpec)

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Register entry-point plugins, then those found in *local_dir*.

        Returns the names of every registered plugin.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_entry_point_classes()
        if local_dir is not None and local_dir.is_dir():
            for py_file in sorted(local_dir.glob("*.py")):
                if not py_file.name.startswith("_"):
                    self._load_local(py_file)
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        name = name or type(plugin).__name__
        self._pm.register(plugin, name=name)
        logger.debug("Registered plugin %s", name)

    def list_plugin_names(self) -> list[str]:
        return [name for name, _plugin in self._pm.list_name_plugin()]

    def notify_command(self, command: str, *, ok: bool, project_root: Path) -> list[str]:
        """Call every ``post_command`` implementation on its own.

        One failing plugin does not stop the others.  Returns one warning
        per failure.
        """
        warnings: list[str] = []
        for impl in self._pm.hook.post_command.get_hookimpls():
            try:
                impl.function(command=command, ok=ok, project_root=str(project_root))
            except Exception as exc:
                logger.debug("Plugin %s failed on %s", impl.plugin_name, command, exc_info=True)
                warnings.append(f"Plugin {impl.plugin_name} failed after {command}: {exc}")
        return warnings

    def _load_local(self, py_file: Path) -> None:
        module_name = f"{LOCAL_MODULE_PREFIX}{py_file.stem}"
        module = _import_file(py_file, module_name)
        if module is None:
            return
        for cls_name, cls in inspect.getmembers(module, _is_hook_class):
            if cls.__module__ != module_name:
                continue
            try:
                self.register_plugin(cls(), name=f"{module_name}.{cls_name}")
            except Exception:
                logger.warning("Cannot instantiate %s from %s", cls_name, py_file, exc_info=True)

    def _instantiate_entry_point_classes(self) -> None:
        # An entry point may name a class; hooks on a bare class have no self.
        for name, plugin in list(self._pm.list_name_plugin()):
            if not _is_hook_class(plugin):
                continue
            self._pm.unregister(plugin)
            try:
                self._pm.register(plugin(), name=name)
            except Exception:
                logger.warning("Cannot instantiate entry-point plugin %s", name, exc_info=True)
