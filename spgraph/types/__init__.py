"""Shared type aliases, enums and result records."""
