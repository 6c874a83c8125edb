"""Integration tests.

Purpose
- Exercise the helpers against the real local disk.

Guidelines
- Work under `tmp_path` only; never touch the user's real directories.
- Mark as 'integration' (applied automatically by conftest).
"""
