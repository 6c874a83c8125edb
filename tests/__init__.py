"""MODEX test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real filesystem interactions under `tmp_path`.
- contract/     : Shared behavior enforced across every `FileSystem` backend.
- e2e/          : The ``modex`` CLI driven through Click's `CliRunner`.

General guidance
- Keep unit fast and deterministic (no real I/O); prefer `MemoryFileSystem`
  and `FixedDirectories` over mocks.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
