"""The ``modex`` command-line interface."""
