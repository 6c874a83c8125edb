"""Top-level error definitions for MODEX."""


class ModexError(Exception):
    """Base class for all MODEX errors."""


class DirectoryNotFoundError(ModexError):
    """Raised when a required platform directory cannot be resolved.

    The temporary directory always resolves. Document, application-support and
    library directories are assumed to exist on a correctly configured host, so
    failing to resolve one is treated as unrecoverable.
    """

    def __init__(self, kind: str) -> None:
        super().__init__(f"{kind} directory not found.")
        self.kind = kind
