"""
Utilities Package
"""

from .data_path_resolver import (
    get_data_directory,
    get_default_network_path,
    get_user_data_directory,
)

__all__ = [
    'get_data_directory',
    'get_default_network_path',
    'get_user_data_directory'
]
