"""Command-line controller for heating, lighting and security in a smart home."""

__version__ = "0.1.0"
__all__ = ["cli", "domain", "storage"]