"""TodoVault: session-authenticated per-user todo service."""

__version__ = "0.1.0"
