"""CLI command modules for fstools."""
