"""Service layer: one method per shortcut command, each returning a ServiceResult."""
