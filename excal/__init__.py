"""Assembler for Excal assembly files and the parts of a small stack machine."""

__version__ = "0.1.0"
__all__ = ["__version__"]