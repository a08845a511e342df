"""
Data path resolver for finding bundled data and per-user data locations.
"""
import os
import sys
from pathlib import Path

DEFAULT_NETWORK_FILE = "mini_metro_network.json"


def get_data_directory() -> Path:
    """
    Get the bundled data directory.

    Returns:
        Path to the data directory shipped with the package

    Raises:
        FileNotFoundError: If the data directory cannot be found
    """
    # Packaged executable: data sits next to the executable
    if getattr(sys, 'frozen', False):
        exe_data_dir = Path(sys.executable).parent / "data"
        if exe_data_dir.exists():
            return exe_data_dir

    # This file is in metroplanner/utils/, so data is at ../data/
    package_data_dir = Path(__file__).parent.parent / "data"
    if package_data_dir.exists():
        return package_data_dir

    raise FileNotFoundError(
        "Could not find data directory. Searched in:\n"
        f"  - {package_data_dir}"
    )


def get_default_network_path() -> Path:
    """Get the path of the bundled default network definition."""
    return get_data_directory() / DEFAULT_NETWORK_FILE


def get_user_data_directory() -> Path:
    """
    Get the per-user data directory for the persisted network and logs.

    Does not create the directory.
    """
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "MetroPlanner"
    if sys.platform == "win32":
        return Path(os.environ.get("APPDATA", Path.home())) / "MetroPlanner"

    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data) / "metroplanner"
    return Path.home() / ".local" / "share" / "metroplanner"
