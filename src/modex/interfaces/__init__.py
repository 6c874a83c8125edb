"""Interfaces (ports) that MODEX helpers depend on.

Abstract base classes for the file system and for well-known directory
resolution. Concrete implementations live in `modex.adapters`.
"""
