"""
Server configuration
Built once at startup and handed to the web app; there is no config file.
"""

import os
from typing import NamedTuple

DEFAULT_IP = "0.0.0.0"
DEFAULT_PORT = 1234


class ConfigError(ValueError):
    """Raised when the server cannot start with the given settings"""


class ServerConfig(NamedTuple):
    save_dir: str
    ip: str = DEFAULT_IP
    port: int = DEFAULT_PORT

    @property
    def bind_address(self) -> str:
        return f"{self.ip}:{self.port}"


def build_config(save_dir, ip=DEFAULT_IP, port=DEFAULT_PORT) -> ServerConfig:
    """
    Validate startup settings and freeze them into a ServerConfig

    Raises:
        ConfigError: If the save directory is missing or the port is out of range
    """
    if not save_dir:
        raise ConfigError("The path to your Satisfactory saves directory is required")

    if not os.path.isdir(save_dir):
        raise ConfigError("Save path does not exist.")

    if not 0 <= port <= 65535:
        raise ConfigError(f"Invalid port: {port}")

    return ServerConfig(
        save_dir=os.path.abspath(save_dir),
        ip=ip or DEFAULT_IP,
        port=port,
    )
