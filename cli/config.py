"""Configuration management for the chunkterm CLI."""

import json
import os
import shutil
import tempfile
from pathlib import Path

from common.constants import DEFAULT_PEER_HOST, DEFAULT_PEER_PORT, PEER_TIMEOUT_SECONDS
from common.logging_config import get_logger

logger = get_logger(__name__)

BYTE_ORDERS = ("big", "little")


class Config:
    """Manages CLI configuration stored in JSON file."""

    DEFAULT_CONFIG = {
        "peer_host": os.environ.get("CHUNKTERM_PEER_HOST", DEFAULT_PEER_HOST),
        "peer_port": int(os.environ.get("CHUNKTERM_PEER_PORT", str(DEFAULT_PEER_PORT))),
        "timeout": PEER_TIMEOUT_SECONDS,
        "max_retries": 3,
        "retry_backoff_multiplier": 2,
        "byte_order": "big",
    }

    def __init__(self, config_path: Path):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.chunkterm/config.json)
        """
        self.config_path = config_path
        self.data = self._load()

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            self.config_path = Path(tempfile.gettempdir()) / '.chunkterm' / 'config.json'
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                config = self.DEFAULT_CONFIG.copy()
                config.update(data)
                return config
            except (json.JSONDecodeError, IOError) as e:
                backup_path = self.config_path.with_suffix('.json.bak')
                logger.warning(f"Unreadable config {self.config_path} ({e}), backing up to {backup_path}")
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError:
                    logger.warning(f"Could not back up {self.config_path}")
                return self.DEFAULT_CONFIG.copy()
        else:
            config = self.DEFAULT_CONFIG.copy()
            self._write(config)
            return config

    def save(self) -> None:
        """Save current configuration to file."""
        self._write(self.data)

    def _write(self, data: dict) -> None:
        try:
            with open(self.config_path, 'w') as f:
                json.dump(data, f, indent=2)
        except IOError as e:
            logger.warning(f"Could not write config {self.config_path}: {e}")

    def get_peer_target(self) -> str:
        """
        Get peer address for the gRPC channel.

        Returns:
            Target string (e.g., "localhost:22222")
        """
        host = self.data.get('peer_host', DEFAULT_PEER_HOST)
        port = self.data.get('peer_port', DEFAULT_PEER_PORT)
        return f"{host}:{port}"

    def set_peer(self, host: str, port: int) -> None:
        """
        Set peer address and save to file.

        Args:
            host: Peer hostname or IP
            port: Peer chunk service port
        """
        self.data['peer_host'] = host
        self.data['peer_port'] = port
        self.save()

    def get_timeout(self) -> float:
        """
        Get RPC timeout in seconds.

        Returns:
            Timeout value in seconds
        """
        return self.data.get('timeout', PEER_TIMEOUT_SECONDS)

    def get_retry_config(self) -> dict:
        """
        Get retry configuration.

        Returns:
            Dictionary with 'max_retries' and 'retry_backoff_multiplier'
        """
        return {
            'max_retries': self.data.get('max_retries', 3),
            'retry_backoff_multiplier': self.data.get('retry_backoff_multiplier', 2),
        }

    def get_byte_order(self) -> str:
        """
        Get byte order for multi-byte elements.

        Returns:
            'big' or 'little'; unknown values fall back to 'big'
        """
        byte_order = str(self.data.get('byte_order', 'big')).lower()
        if byte_order not in BYTE_ORDERS:
            logger.warning(f"Unknown byte_order '{byte_order}' in config, using 'big'")
            return 'big'
        return byte_order
