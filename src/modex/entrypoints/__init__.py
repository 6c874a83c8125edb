"""Entrypoints (inbound adapters) for MODEX.

Expose the helpers to the outside world. Currently only the ``modex`` CLI,
which parses options, calls into the library and presents results.
"""
