"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O; use `MemoryFileSystem` and `FixedDirectories` at boundaries.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic (seed any randomness).
"""
