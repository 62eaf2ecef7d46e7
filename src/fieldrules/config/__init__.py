"""Configuration layer — settings, discovery, and logging setup."""
