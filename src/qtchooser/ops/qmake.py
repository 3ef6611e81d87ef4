"""Interface for querying a qmake binary about its installation."""

from abc import ABC, abstractmethod


class QtQuery(ABC):
    """Abstract interface for ``qmake -query``.

    Installing an SDK only needs two values from qmake; this keeps the
    subprocess call out of the install algorithm.
    """

    @abstractmethod
    def query(self, qmake_path: str, variable: str) -> str:
        """Return the first line printed by ``<qmake_path> -query <variable>``.

        Args:
            qmake_path: Path to the qmake executable
            variable: Property name, e.g. QT_INSTALL_BINS

        Returns:
            The value without its trailing newline

        Raises:
            RuntimeError: If qmake cannot be run, fails, or prints nothing
        """
        ...
