"""
UCDrive Client - CLI Mode Module

Implements the command-line operations.
Uses the stored cookie, executes one operation and logs to a timestamped file.

Author: UCDrive Project
"""

import sys
import getpass
import logging
import mimetypes
from argparse import Namespace
from pathlib import Path
from datetime import datetime
from typing import Optional

from managers import ConfigManager
from models import Account, FileStream, DEFAULT_MIME_TYPE
from api import UCDriveAPI
from exceptions import (
    UCDriveError,
    UCDriveAuthError,
    UCDriveConfigError,
    UCDriveNotFoundError
)
from operations import UCDriveOperations


# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_AUTH_ERROR = 3
EXIT_NOT_FOUND = 4


def setup_cli_logging(config_manager: ConfigManager) -> Path:
    """
    Setup logging for CLI mode with timestamped log file.

    Creates log file with format: ucdrive-YYYY-MM-DD-HH-MM-SS.log
    in a "logs" subdirectory next to config.json.

    Args:
        config_manager: ConfigManager instance for log settings

    Returns:
        Path to the created log file
    """
    log_level = config_manager.get("log_level", "INFO")

    timestamp = datetime.now().strftime("%Y-%m-%d-%H-%M-%S")
    log_dir = config_manager.config_file.parent / "logs"
    log_dir.mkdir(exist_ok=True)
    log_file = log_dir / f"ucdrive-{timestamp}.log"

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler(sys.stderr)  # Keep stdout for command output
        ]
    )

    logger = logging.getLogger(__name__)
    logger.debug(f"UCDrive CLI Mode - Log file: {log_file}")

    return log_file


def cleanup_old_logs(config_manager: ConfigManager, current_log: Path):
    """
    Delete log files older than retention period.

    Args:
        config_manager: ConfigManager instance for retention settings
        current_log: Path to current log file (don't delete this)
    """
    logger = logging.getLogger(__name__)
    retention_days = config_manager.get("log_retention_days", 30)

    if retention_days <= 0:
        return  # Retention disabled

    cutoff_time = datetime.now().timestamp() - (retention_days * 86400)

    deleted_count = 0
    for log_file in current_log.parent.glob("ucdrive-*.log"):
        if log_file == current_log:
            continue

        try:
            if log_file.stat().st_mtime < cutoff_time:
                log_file.unlink()
                deleted_count += 1
        except OSError as e:
            logger.warning(f"Failed to delete old log file {log_file}: {e}")

    if deleted_count > 0:
        logger.info(f"Deleted {deleted_count} old log file(s)")


def build_operations(config_manager: ConfigManager, account: Optional[Account] = None) -> UCDriveOperations:
    """
    Create the API client and drive operations from configuration.

    Args:
        config_manager: ConfigManager with loaded configuration
        account: Account to use instead of the one from the stored cookie

    Raises:
        UCDriveConfigError: If no cookie is stored or the configuration is invalid
    """
    if account is None:
        account = config_manager.get_account()
    api_client = UCDriveAPI(
        account,
        base_url=config_manager.get("api_base_url"),
        referer=config_manager.get("referer"),
        timeout=config_manager.get("request_timeout", 30)
    )
    return UCDriveOperations(api_client, account, temp_dir=config_manager.get("temp_dir"))


def format_entry(entry) -> str:
    kind = "d" if entry.is_dir else "-"
    updated = entry.updated_at.strftime("%Y-%m-%d %H:%M")
    return f"{kind} {entry.size:>12} {updated} {entry.name}"


def run_upload(ops: UCDriveOperations, args: Namespace) -> int:
    logger = logging.getLogger(__name__)
    local_path = Path(args.local_path)
    if not local_path.is_file():
        logger.error(f"Local file not found: {local_path}")
        return EXIT_NOT_FOUND

    name = args.name or local_path.name
    mime_type = args.mime_type or mimetypes.guess_type(name)[0] or DEFAULT_MIME_TYPE

    def cli_progress_callback(message: str, current: int, total: int):
        if total > 0:
            percentage = (current / total) * 100
            logger.info(f"[{percentage:5.1f}%] {message}")
        else:
            logger.info(message)

    with open(local_path, 'rb') as f:
        ops.upload(
            FileStream(
                stream=f,
                name=name,
                size=local_path.stat().st_size,
                parent_path=args.remote_dir,
                mime_type=mime_type
            ),
            cli_progress_callback
        )
    return EXIT_SUCCESS


def run_cli_operation(operation: str, args: Namespace) -> int:
    """
    Execute one CLI operation.

    Process:
    1. Load configuration
    2. Setup logging to timestamped file
    3. Build the drive operations from the stored cookie
    4. Execute requested operation
    5. Return appropriate exit code

    Args:
        operation: Subcommand name
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    logger = None

    try:
        config_mgr = ConfigManager()
        config_mgr.load_config()
        log_file = setup_cli_logging(config_mgr)
        logger = logging.getLogger(__name__)

        cleanup_old_logs(config_mgr, log_file)

        if operation == "login":
            cookie = args.cookie or getpass.getpass("Cookie: ")
            if not cookie:
                logger.error("No cookie given")
                return EXIT_CONFIG_ERROR
            account = config_mgr.build_account(cookie)
            build_operations(config_mgr, account).validate_account()
            config_mgr.store_cookie(cookie)
            logger.info("Cookie accepted by server and stored")
            return EXIT_SUCCESS

        ops = build_operations(config_mgr)

        if operation == "check":
            ops.validate_account()
            logger.info("Cookie accepted by server")
        elif operation == "ls":
            file, children = ops.path(args.path)
            for entry in ([file] if file is not None else children):
                print(format_entry(entry))
        elif operation == "upload":
            return run_upload(ops, args)
        elif operation == "link":
            print(ops.link(args.path).url)
        elif operation == "mkdir":
            ops.make_dir(args.path)
        elif operation == "mv":
            ops.move(args.src, args.dst)
        elif operation == "rename":
            ops.rename(args.src, args.dst)
        elif operation == "rm":
            ops.delete(args.path)
        else:
            logger.error(f"Unknown operation: {operation}")
            return EXIT_FAILURE

        return EXIT_SUCCESS

    except UCDriveConfigError as e:
        if logger:
            logger.error(f"Configuration error: {e}")
        else:
            print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    except UCDriveAuthError as e:
        logger.error(f"Authentication error: {e}")
        return EXIT_AUTH_ERROR

    except UCDriveNotFoundError as e:
        logger.error(f"Not found: {e}")
        return EXIT_NOT_FOUND

    except UCDriveError as e:
        if logger:
            logger.error(f"{operation} failed: {e}")
        else:
            print(f"{operation} failed: {e}", file=sys.stderr)
        return EXIT_FAILURE

    except KeyboardInterrupt:
        if logger:
            logger.warning("Operation cancelled by user (Ctrl+C)")
        else:
            print("\nOperation cancelled by user", file=sys.stderr)
        return EXIT_FAILURE

    except Exception as e:
        if logger:
            logger.exception(f"Unexpected error: {e}")
        else:
            print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_FAILURE
