"""HelpService — the static command menu."""

from __future__ import annotations

from uvmake.domain.catalog import commands_by_section
from uvmake.services.result import ServiceResult


class HelpService:
    """Builds the menu from the command catalog.  Needs no project."""

    @staticmethod
    def menu() -> ServiceResult:
        sections = {
            section: [{"name": spec.name, "description": spec.description} for spec in specs]
            for section, specs in commands_by_section().items()
            if specs
        }
        return ServiceResult(ok=True, op="help", data={"sections": sections})
