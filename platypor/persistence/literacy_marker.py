"""Literacy marker written when the player learns to read."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from platypor.config import DEFAULT_STATE_DIR

logger = logging.getLogger(__name__.split(".")[-1])

MARKER_FILENAME = "literacy.json"


class LiteracyMarker:
    """Writes and checks the on-disk literacy marker."""

    def __init__(self, directory: Optional[str] = None):
        """
        Initialize literacy marker.

        Args:
            directory: Directory holding the marker, created on first write
        """
        self.directory = Path(directory or DEFAULT_STATE_DIR)

    @property
    def path(self) -> Path:
        return self.directory / MARKER_FILENAME

    def write(self) -> Path:
        """
        Write the marker file.

        Returns:
            Path of the written marker
        """
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            logger.error(f"Permission denied creating directory: {self.directory}")
            raise

        payload = {"can_read": True, "written_at": datetime.now().isoformat()}
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
        logger.info(f"Literacy marker written to {self.path}")
        return self.path

    def exists(self) -> bool:
        return self.path.is_file()

    def __call__(self) -> None:
        """Use the marker directly as the engine's literacy hook."""
        self.write()
