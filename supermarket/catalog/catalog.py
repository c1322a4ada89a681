"""
==============================================================================
Produce Catalog Module
==============================================================================

Thread-safe in-memory catalog of produce items keyed by produce code.

Features:
---------
- Add / get / delete / list over a single keyed collection
- All-or-nothing batch adds with per-item validation
- Silent skip of codes that are already stored
- Deterministic listing (ordered by produce code)
- One lock shared by every read and write path

Seed JSON Structure:
-------------------
[
  {"code": "A12T-4GH7-QPL9-3N4M", "name": "Lettuce", "price": "3.41"},
  ...
]

==============================================================================
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from supermarket.core import exceptions
from supermarket.schemas.item import ItemCreate
from supermarket.utils.validators import ItemValidator, validate_code

from .models import Item


# Module logger
logger = logging.getLogger(__name__)


DEFAULT_ITEMS: List[ItemCreate] = [
    ItemCreate(code="A12T-4GH7-QPL9-3N4M", name="Lettuce", price="3.41"),
    ItemCreate(code="E5T6-9UI3-TH15-QR88", name="Peach", price="2.99"),
    ItemCreate(code="TQ4C-VV6T-75ZX-1RMR", name="Gala Apple", price="3.59"),
    ItemCreate(code="YRT6-72AS-K736-L4AR", name="Green Pepper", price="0.79"),
]

_seed_adapter = TypeAdapter(List[ItemCreate])


class CatalogStore:
    """
    In-memory produce catalog guarded by a mutual-exclusion lock.

    Readers and writers share the same lock, so a listing never observes a
    half-applied batch.

    Example:
        >>> store = CatalogStore()
        >>> store.add([ItemCreate(code="ZRT6-72AS-K736-L4AZ", name="Greener Pepper", price="9.99")])
        True
        >>> store.get("ZRT6-72AS-K736-L4AZ").display_price
        '$9.99'
    """

    def __init__(self, items: Optional[Iterable[ItemCreate]] = None) -> None:
        """
        Initialize the catalog.

        Args:
            items: Optional records to seed the catalog with
        """
        self._items: Dict[str, Item] = {}
        self._lock = threading.Lock()
        self._validator = ItemValidator()

        if items is not None:
            self.seed(items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, code: object) -> bool:
        with self._lock:
            return code in self._items

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def _build_items(self, candidates: Sequence[ItemCreate]) -> List[Item]:
        """
        Validate a batch and convert it to stored items.

        Stops at the first rejected candidate; every error of that candidate
        is reported.

        Raises:
            AppException: VALIDATION_ERROR for the first rejected candidate
        """
        items = []
        for index, candidate in enumerate(candidates):
            cents, errors = self._validator.validate(
                candidate.code, candidate.name, candidate.price
            )
            if errors:
                logger.debug(f"Rejected item [{index}]: {[e.message for e in errors]}")
                raise exceptions.item_validation_failed(index, errors)

            items.append(Item(code=candidate.code, name=candidate.name, price_cents=cents))
        return items

    @staticmethod
    def _check_code(code: str) -> None:
        error = validate_code(code)
        if error:
            raise exceptions.invalid_produce_code(error)

    # =========================================================================
    # OPERATIONS
    # =========================================================================

    def add(self, candidates: Sequence[ItemCreate]) -> bool:
        """
        Add a batch of items.

        Nothing is stored unless every candidate is valid. Codes that are
        already in the catalog (or repeated within the batch) are skipped.

        Args:
            candidates: Submitted item records

        Returns:
            True if at least one new item was stored

        Raises:
            AppException: VALIDATION_ERROR if any candidate is rejected
        """
        items = self._build_items(candidates)

        added = 0
        with self._lock:
            for item in items:
                if item.code in self._items:
                    logger.debug(f"Item {item.code} exists, skipped")
                    continue
                self._items[item.code] = item
                added += 1

        if added:
            logger.info(f"Added {added} item(s) to catalog")
        return added > 0

    def get(self, code: str) -> Optional[Item]:
        """
        Look up an item by produce code.

        Args:
            code: Produce code

        Returns:
            Item, or None if the code is well-formed but not stored

        Raises:
            AppException: INVALID_PRODUCE_CODE if the code is malformed
        """
        self._check_code(code)
        with self._lock:
            return self._items.get(code)

    def delete(self, code: str) -> None:
        """
        Remove an item by produce code.

        Removing a well-formed code that is not stored is not an error.

        Raises:
            AppException: INVALID_PRODUCE_CODE if the code is malformed
        """
        self._check_code(code)
        with self._lock:
            removed = self._items.pop(code, None)

        if removed:
            logger.info(f"Deleted item {code}")
        else:
            logger.debug(f"Delete of absent item {code}")

    def list(self) -> List[Item]:
        """Get all items ordered by produce code."""
        with self._lock:
            return sorted(self._items.values(), key=lambda item: item.code)

    # =========================================================================
    # SEEDING
    # =========================================================================

    def seed(self, records: Iterable[ItemCreate]) -> int:
        """
        Load records through the regular add path.

        Returns:
            Number of items in the catalog afterwards
        """
        self.add(list(records))
        return len(self)

    def load_file(self, seed_file: Path) -> int:
        """
        Seed the catalog from a JSON list of item records.

        Args:
            seed_file: Path to the seed JSON file

        Returns:
            Number of items in the catalog afterwards

        Raises:
            AppException: SEED_FAILED if the file is unreadable or invalid
        """
        source = str(seed_file)
        try:
            with seed_file.open("r", encoding="utf-8") as f:
                data = json.load(f)
            records = _seed_adapter.validate_python(data)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Cannot read seed file {source}: {e}")
            raise exceptions.seed_failed(source, str(e)) from e
        except ValidationError as e:
            logger.error(f"Invalid seed file {source}: {e}")
            invalid = exceptions.invalid_request_body(e.errors())
            raise exceptions.seed_failed(source, invalid.message) from e

        try:
            count = self.seed(records)
        except exceptions.AppException as e:
            raise exceptions.seed_failed(source, e.message, e.details) from e

        logger.info(f"Loaded {len(records)} seed record(s) from {source}")
        return count


# =============================================================================
# FACTORY
# =============================================================================

def create_catalog(seed: bool = True, seed_file: Optional[Path] = None) -> CatalogStore:
    """
    Create a catalog for one application instance.

    Args:
        seed: Whether to pre-load items
        seed_file: JSON file replacing the built-in items (optional)

    Returns:
        New CatalogStore
    """
    store = CatalogStore()
    if not seed:
        return store

    if seed_file is not None:
        store.load_file(seed_file)
    else:
        store.seed(DEFAULT_ITEMS)

    return store
