"""Pure, dependency-light helpers over text and sequences.

Scope:
- Small, stateless helpers (normalizing, validating and masking strings;
  safe access, chunking and grouping of sequences).
- No I/O. The only state any helper touches is the value handed to it; the
  mutating sequence helpers act on a list owned by the caller.
- Organized by single-purpose modules (``text.py``, ``sequences.py``) rather
  than one catch-all file.

Public API:
- Nothing is re-exported at the package level. Import helpers from their
  defining modules.
"""
