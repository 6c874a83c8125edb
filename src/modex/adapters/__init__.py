"""Adapters (concrete implementations) for MODEX interfaces.

- `filesystem.local` / `filesystem.memory`: real disk and in-RAM file systems.
- `directories`: platformdirs-backed and fixed directory resolution.
"""
