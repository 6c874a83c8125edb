"""Well-known directory interface definitions.

A `Directories` implementation answers "where do temporary files, documents,
application support data and library data live?" with absolute paths. It only
resolves locations; it never creates them.
"""

import abc
from pathlib import Path

# pylint: disable=too-few-public-methods


class Directories(abc.ABC):
    """Interface for resolving well-known platform directories."""

    @abc.abstractmethod
    def temporary(self) -> Path:
        """Return the temporary directory. Always resolvable."""

    @abc.abstractmethod
    def document(self) -> Path:
        """Return the per-user document directory.

        Raises:
            DirectoryNotFoundError: If the directory cannot be resolved.
        """

    @abc.abstractmethod
    def application_support(self) -> Path:
        """Return the per-user application-support directory.

        Raises:
            DirectoryNotFoundError: If the directory cannot be resolved.
        """

    @abc.abstractmethod
    def library(self) -> Path:
        """Return the per-user library directory.

        Raises:
            DirectoryNotFoundError: If the directory cannot be resolved.
        """
