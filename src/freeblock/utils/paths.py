"""
Path management for FreeBlock

Handles platform-specific user data directories following standard conventions:
- macOS: ~/Library/Application Support/FreeBlock/
- Linux: ~/.local/share/freeblock/
- Windows: %APPDATA%/FreeBlock/

Only the log directory lives here; the block graph itself is held in memory.
"""
import os
import sys
from pathlib import Path


# Application name
APP_NAME = "FreeBlock"

# Environment override for the data directory (used by tests and sandboxes)
DATA_DIR_ENV = "FREEBLOCK_DATA_DIR"


def get_user_data_dir() -> Path:
    """
    Get platform-specific user data directory.
    
    Returns:
        Path to user data directory where logs are stored.
    """
    override = os.getenv(DATA_DIR_ENV)
    if override:
        user_data_dir = Path(override)
    else:
        system = sys.platform
        if system == "darwin":  # macOS
            base = Path.home() / "Library" / "Application Support"
            user_data_dir = base / APP_NAME
        elif system == "win32":  # Windows
            base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
            user_data_dir = base / APP_NAME
        else:  # Linux and other Unix-like
            user_data_dir = Path.home() / ".local" / "share" / "freeblock"
    
    user_data_dir.mkdir(parents=True, exist_ok=True)
    return user_data_dir


def get_logs_dir() -> Path:
    """
    Get directory for application logs.
    
    Returns:
        Path to logs directory (stored in user data directory).
    """
    logs_dir = get_user_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir
