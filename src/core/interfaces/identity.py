"""Abstract interface for record identifier generation."""

from abc import ABC, abstractmethod


class IIdGenerator(ABC):
    """Produces record identifiers unique within the process."""

    @abstractmethod
    def new_id(self) -> str:
        """Return a fresh identifier."""
        ...
