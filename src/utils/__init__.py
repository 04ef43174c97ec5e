"""
Utility modules for the contracts API
"""
from .config_loader import ServerConfig, load_server_config

__all__ = [
    'ServerConfig',
    'load_server_config',
]
