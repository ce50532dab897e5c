"""Service layer shared by the CLI commands."""
