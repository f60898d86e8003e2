"""Core configuration, translation and theming for fstools."""
