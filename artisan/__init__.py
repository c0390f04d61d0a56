"""Artisan -- resource code generator for TypeScript/Express projects."""

__all__ = ["__version__"]
__version__ = "0.1.0"
