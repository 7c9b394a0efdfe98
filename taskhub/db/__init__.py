"""Database package: engine/session setup, schema creation and seeding."""
