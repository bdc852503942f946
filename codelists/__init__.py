"""Clinical code lists with per-coding-system validation."""

__version__ = "0.1.0"
