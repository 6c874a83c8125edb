"""MODEX

Stateless convenience helpers over everyday Python values: text, sequences,
JSON/Plist codecs and the filesystem. Every helper takes a value and returns a
freshly built one; nothing is cached between calls.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
