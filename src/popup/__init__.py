"""popup — resolve and validate popup window configurations."""

__version__ = '0.3.0'
