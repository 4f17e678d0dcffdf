"""
UCDrive Client - Configuration Manager

Handles loading and saving client configuration from/to config.json.
Manages OS credential store integration for the account cookie.

Author: UCDrive Project
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Dict, Any

import keyring
from pydantic import ValidationError

from exceptions import UCDriveConfigError
from models import Account

# Configure logging
logger = logging.getLogger(__name__)


KEYRING_SERVICE = "UCDrive"

# Default configuration values
DEFAULT_CONFIG = {
    "api_base_url": "https://pc-api.uc.cn/1/clouddrive",
    "referer": "https://drive.uc.cn",
    "account_name": "uc",  # Cookie stored in OS credential store under this name
    "root_folder": "0",  # fid of the folder mounted as "/"
    "order_by": "file_name",  # file_type, file_name or updated_at
    "order_direction": "asc",  # asc or desc
    "temp_dir": None,  # None means use the OS temporary directory
    "request_timeout": 30,
    "log_level": "INFO",
    "log_retention_days": 30
}


class ConfigManager:
    """
    Manages client configuration and credentials.

    Responsibilities:
    - Load/save config.json next to the executable (same location as logs folder)
    - Store/retrieve the account cookie from OS credential store via keyring
    - Build the validated Account used by the driver
    """

    def __init__(self, base_dir: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            base_dir: Directory holding config.json. Defaults to the executable's
                      directory when frozen, otherwise the working directory.
        """
        if base_dir is None:
            if getattr(sys, 'frozen', False):
                # Running as compiled executable
                base_dir = Path(sys.executable).parent
            else:
                # Running as script
                base_dir = Path.cwd()

        self.config_file = Path(base_dir) / "config.json"
        self.config: Dict[str, Any] = {}

    def load_config(self) -> Dict[str, Any]:
        """
        Load configuration from config.json.
        Creates default config if file doesn't exist.

        Returns:
            Configuration dictionary
        """
        if self.config_file.exists():
            logger.debug(f"Loading configuration from {self.config_file}")
            with open(self.config_file, 'r') as f:
                self.config = json.load(f)
            # Merge with defaults for any missing keys
            for key, value in DEFAULT_CONFIG.items():
                if key not in self.config:
                    self.config[key] = value
            logger.info("Configuration loaded successfully")
        else:
            logger.info(f"Configuration file not found, creating default at {self.config_file}")
            self.config = DEFAULT_CONFIG.copy()
            self.save_config()

        return self.config

    def save_config(self):
        """Save current configuration to config.json."""
        logger.debug(f"Saving configuration to {self.config_file}")
        with open(self.config_file, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get(self, key: str, default=None) -> Any:
        return self.config.get(key, default)

    def set(self, key: str, value: Any):
        """
        Set configuration value and save to file.

        Args:
            key: Configuration key
            value: Configuration value
        """
        self.config[key] = value
        self.save_config()

    def store_cookie(self, cookie: str):
        """
        Store the account cookie in OS credential store.

        Args:
            cookie: Cookie header value copied from a logged-in browser session
        """
        account_name = self.get("account_name", DEFAULT_CONFIG["account_name"])
        logger.info(f"Storing cookie for account: {account_name}")
        keyring.set_password(KEYRING_SERVICE, account_name, cookie)

    def get_cookie(self) -> Optional[str]:
        """
        Retrieve the account cookie from OS credential store.

        Returns:
            Cookie string or None if not found
        """
        account_name = self.get("account_name", DEFAULT_CONFIG["account_name"])
        cookie = keyring.get_password(KEYRING_SERVICE, account_name)
        if not cookie:
            logger.warning(f"No cookie found in credential store for account: {account_name}")
            return None
        return cookie

    def get_account(self) -> Account:
        """
        Build the Account for the configured drive.

        Returns:
            Validated Account

        Raises:
            UCDriveConfigError: If no cookie is stored or a setting is invalid
        """
        cookie = self.get_cookie()
        if not cookie:
            raise UCDriveConfigError("No cookie stored - run 'ucdrive login' first")
        return self.build_account(cookie)

    def build_account(self, cookie: str) -> Account:
        """
        Build an Account from the configuration and the given cookie.

        Raises:
            UCDriveConfigError: If a setting or the cookie is invalid
        """
        try:
            return Account(
                name=self.get("account_name"),
                access_token=cookie,
                root_folder=self.get("root_folder"),
                order_by=self.get("order_by"),
                order_direction=self.get("order_direction")
            )
        except ValidationError as e:
            raise UCDriveConfigError(f"Invalid configuration: {e}") from e
