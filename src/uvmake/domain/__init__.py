"""Domain layer: command catalog and version resolution (pure, no I/O side effects)."""
