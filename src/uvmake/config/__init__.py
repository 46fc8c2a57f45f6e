"""Configuration: TOML discovery, settings, and logging."""
