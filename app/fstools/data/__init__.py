"""Bundled data files for fstools."""
