"""
Network Store Interface

Interface for loading and persisting network definitions.
"""

from abc import ABC, abstractmethod

from ..models.network import MetroNetwork


class INetworkStore(ABC):
    """Interface for network store operations."""

    @abstractmethod
    def load(self) -> MetroNetwork:
        """
        Load the current network definition.

        Falls back to the bundled default when nothing has been saved.

        Returns:
            Immutable network snapshot
        """
        pass

    @abstractmethod
    def save(self, network: MetroNetwork) -> None:
        """
        Persist a network definition.

        Args:
            network: Network snapshot to save
        """
        pass

    @abstractmethod
    def reset(self) -> None:
        """Discard the persisted definition so the default is loaded again."""
        pass
