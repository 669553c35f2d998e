# ABOUTME: Small JSON key/value store for presets and the disc bag
# ABOUTME: One file per key; unreadable or missing files load as None

import json
import logging
import os
from typing import Any, Optional

log = logging.getLogger(__name__)


class JsonStore:
    """Persists JSON documents under a data directory, keyed by a fixed name"""

    def __init__(self, data_dir: str):
        self.data_dir = data_dir

    def path_for(self, key: str) -> str:
        return os.path.join(self.data_dir, f"{key}.json")

    def load(self, key: str) -> Optional[Any]:
        """
        Load the document stored under key.

        Returns:
            Decoded JSON, or None when the file is missing or undecodable.
        """
        path = self.path_for(key)
        if not os.path.exists(path):
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            log.error(f"Failed to load {key} from {path}: {e}")
            return None

    def save(self, key: str, value: Any) -> bool:
        """
        Store value under key, replacing the previous document.

        Returns:
            True on success, False if the write failed (logged).
        """
        path = self.path_for(key)
        tmp_path = f"{path}.tmp"
        try:
            os.makedirs(self.data_dir, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(value, f, ensure_ascii=False, indent=4)
            os.replace(tmp_path, path)
            return True
        except (OSError, TypeError, ValueError) as e:
            log.error(f"Failed to save {key} to {path}: {e}")
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            return False
