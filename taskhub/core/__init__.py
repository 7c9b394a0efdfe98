"""Core configuration, enums and logging."""
