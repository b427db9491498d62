"""PageCraft: a minimal page-publishing backend."""

__version__ = "0.1.0"
