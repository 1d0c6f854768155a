"""Core building blocks: validation engine and logging setup."""
