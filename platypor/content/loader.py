"""Loads catalog, dialogue and balance files at startup."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from platypor.config import DEFAULT_BALANCE_PATH, DEFAULT_CATALOG_PATH, DEFAULT_DIALOGUES_PATH
from platypor.content.dialogue import DialogueData
from platypor.models.balance import GameBalance
from platypor.models.catalog import Catalog

logger = logging.getLogger(__name__.split(".")[-1])


class ContentLoadError(Exception):
    """A content file is missing or malformed; the application cannot start."""


def _read_json(path: Path) -> Any:
    if not path.is_file():
        raise ContentLoadError(f"File not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ContentLoadError(f"Invalid JSON in {path}: {e}") from e


def _validate(path: Path, schema: type[BaseModel], data: Any):
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise ContentLoadError(f"Failed to load {path}: {e.errors()}") from e


def load_catalog(path: Optional[str] = None) -> Catalog:
    """
    Load action and product definitions.

    Args:
        path: JSON file with "actionButtons" and "productButtons" lists

    Returns:
        Validated Catalog

    Raises:
        ContentLoadError: If the file is missing or malformed
    """
    catalog_path = Path(path or DEFAULT_CATALOG_PATH)
    catalog = _validate(catalog_path, Catalog, _read_json(catalog_path))
    logger.info(
        f"Loaded catalog from {catalog_path}: {len(catalog.actions)} actions, {len(catalog.products)} products"
    )
    for product in catalog.products:
        if product.kind is None:
            logger.warning(f"Product {product.id} has no known effect")
    return catalog


def load_dialogues(path: Optional[str] = None) -> DialogueData:
    """
    Load dialogue lines.

    Raises:
        ContentLoadError: If the file is missing or malformed
    """
    dialogues_path = Path(path or DEFAULT_DIALOGUES_PATH)
    dialogues = _validate(dialogues_path, DialogueData, _read_json(dialogues_path))
    logger.info(f"Loaded {len(dialogues.voice_lines)} voice lines from {dialogues_path}")
    return dialogues


def load_balance(path: Optional[str] = DEFAULT_BALANCE_PATH) -> GameBalance:
    """
    Load balance overrides on top of the defaults.

    Args:
        path: Optional JSON object of GameBalance field overrides; None means defaults

    Raises:
        ContentLoadError: If the file is missing, malformed or has unknown keys
    """
    if path is None:
        return GameBalance()

    balance_path = Path(path)
    balance = _validate(balance_path, GameBalance, _read_json(balance_path))
    logger.info(f"Loaded balance overrides from {balance_path}")
    return balance
