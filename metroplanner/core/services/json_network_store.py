"""
JSON Network Store Implementation

Store implementation for loading and saving network definitions as JSON files.
"""

import hashlib
import json
import logging
from pathlib import Path
from typing import Optional, Dict, Any

from ...utils.data_path_resolver import get_default_network_path, get_user_data_directory
from ..exceptions import NetworkDefinitionError, NetworkStoreError
from ..interfaces.i_network_store import INetworkStore
from ..models.network import MetroNetwork


class JsonNetworkStore(INetworkStore):
    """
    Store for the network definition.

    Reads the persisted definition when one exists and otherwise the bundled
    default. Every load returns a fresh snapshot; nothing is cached between
    calls, so a save is visible to the very next load.
    """

    def __init__(self, network_path: Optional[str] = None, default_path: Optional[str] = None):
        """
        Initialize the JSON network store.

        Args:
            network_path: Where the edited network is persisted
            default_path: Bundled default network definition
        """
        self.logger = logging.getLogger(__name__)
        if network_path is None:
            self.network_path = get_user_data_directory() / "network.json"
        else:
            self.network_path = Path(network_path)

        if default_path is None:
            self.default_path = get_default_network_path()
        else:
            self.default_path = Path(default_path)

        self.logger.info(f"Initialized JsonNetworkStore with network path: {self.network_path}")

    def load(self) -> MetroNetwork:
        """Load the persisted network, falling back to the bundled default."""
        if self.network_path.exists():
            try:
                network = MetroNetwork.from_dict(self._read_json(self.network_path))
                self.logger.info(f"Loaded network with {len(network.lines)} lines from {self.network_path}")
                return network
            except json.JSONDecodeError as e:
                self.logger.warning(
                    f"MALFORMED JSON in saved network {self.network_path} at line {e.lineno}, "
                    f"column {e.colno}; falling back to default"
                )
                self._discard_saved_network()
            except UnicodeDecodeError as e:
                self.logger.warning(
                    f"Saved network {self.network_path} is not valid UTF-8 ({e.reason} at byte {e.start}); "
                    f"falling back to default"
                )
                self._discard_saved_network()
            except NetworkDefinitionError as e:
                self.logger.warning(f"Invalid saved network {self.network_path}: {e}; falling back to default")
                self._discard_saved_network()
            except OSError as e:
                raise NetworkStoreError(f"Failed to read saved network {self.network_path}: {e}") from e

        try:
            network = MetroNetwork.from_dict(self._read_json(self.default_path))
        except (OSError, json.JSONDecodeError, UnicodeDecodeError, NetworkDefinitionError) as e:
            raise NetworkStoreError(f"Failed to load default network {self.default_path}: {e}") from e

        self.logger.info(f"Loaded default network with {len(network.lines)} lines from {self.default_path}")
        return network

    def save(self, network: MetroNetwork) -> None:
        """Persist a network definition."""
        try:
            self.network_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.network_path, "w", encoding="utf-8") as f:
                json.dump(network.to_dict(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise NetworkStoreError(f"Failed to save network to {self.network_path}: {e}") from e

        self.logger.info(f"Network saved to {self.network_path}")

    def reset(self) -> None:
        """Remove the persisted network so the default is loaded next."""
        try:
            if self.network_path.exists():
                self.network_path.unlink()
        except OSError as e:
            raise NetworkStoreError(f"Failed to reset network at {self.network_path}: {e}") from e

        self.logger.info("Network reset to default")

    def has_saved_network(self) -> bool:
        return self.network_path.exists()

    def _read_json(self, path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _discard_saved_network(self) -> None:
        try:
            self.network_path.unlink()
        except OSError as e:
            self.logger.error(f"Failed to remove invalid saved network {self.network_path}: {e}")


def snapshot_version(network: MetroNetwork) -> str:
    """
    Get a content digest of a network snapshot.

    Callers that keep a "current network" compare digests to know when a
    cached snapshot is stale and routes must be planned again.
    """
    canonical = json.dumps(network.to_dict(), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
