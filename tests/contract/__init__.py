"""Contract tests.

Behavior of the `FileSystem` port, written once and run against every backend
(`LocalFileSystem` and `MemoryFileSystem`) so they stay interchangeable.
"""
