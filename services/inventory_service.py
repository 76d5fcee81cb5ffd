import copy
import logging
import threading
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr

logger = logging.getLogger(__name__)

MESSAGE_INVALID_JSON = "Invalid JSON."
MESSAGE_ID_NOT_FOUND = "Item ID not found."
MESSAGE_NAME_NOT_FOUND = "Item name not found."
MESSAGE_ID_EXISTS = "Item ID already exists."
MESSAGE_ID_DOES_NOT_EXIST = "Item ID does not exist."
MESSAGE_DELETED = "Success: Item deleted!"


class InventoryError(Exception):
    """Base error for a rejected inventory request"""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequest(InventoryError):
    status_code = 400


class NotFound(InventoryError):
    status_code = 404


class ItemUpdate(BaseModel):
    """Partial update for an item. Every field is optional."""
    model_config = ConfigDict(strict=True)

    name: Optional[str] = None
    price: Optional[float] = None
    description: Optional[str] = None

    _payload: Dict[str, Any] = PrivateAttr(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ItemUpdate":
        """Validate a decoded JSON body, keeping its values as sent"""
        update = cls.model_validate(payload)
        update._payload = payload
        return update

    def changes(self) -> Dict[str, Any]:
        """
        Fields that should overwrite the stored item.

        Omitted, null and empty-string fields are all treated as "leave unchanged".
        A price of 0 is a real value and is applied. Values come back exactly as
        they appeared in the request body, so an integer price stays an integer.
        """
        updates = {}
        for field in ("name", "price", "description"):
            value = getattr(self, field)
            if value is None or value == "":
                continue
            updates[field] = self._payload.get(field, value)
        return updates


class Inventory:
    """In-memory store of items keyed by integer id, guarded by a single lock"""

    def __init__(self):
        self._items: Dict[int, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, item_id: int) -> bool:
        with self._lock:
            return item_id in self._items

    def get(self, item_id: int, name: Optional[str] = None) -> Dict[str, Any]:
        """
        Look up an item by id, optionally requiring its name to match exactly.

        Args:
            item_id (int): The item id
            name (str): Optional case-sensitive name filter; empty means no filter

        Returns:
            dict: A copy of the stored item

        Raises:
            NotFound: if the id is unknown or the name does not match
        """
        with self._lock:
            item = self._items.get(item_id)
            if item is None:
                raise NotFound(MESSAGE_ID_NOT_FOUND)
            if name and item.get("name") != name:
                raise NotFound(MESSAGE_NAME_NOT_FOUND)
            return copy.deepcopy(item)

    def create(self, item_id: int, item: Dict[str, Any]) -> Dict[str, Any]:
        """Store the item verbatim under a fresh id and return a copy of it"""
        with self._lock:
            if item_id in self._items:
                raise BadRequest(MESSAGE_ID_EXISTS)
            self._items[item_id] = copy.deepcopy(item)
            logger.info(f"Created item {item_id}")
            return copy.deepcopy(self._items[item_id])

    def update(self, item_id: int, update: ItemUpdate) -> Dict[str, Any]:
        with self._lock:
            item = self._items.get(item_id)
            if item is None:
                raise NotFound(MESSAGE_ID_DOES_NOT_EXIST)
            changes = update.changes()
            item.update(changes)
            logger.info(f"Updated item {item_id}: {sorted(changes)}")
            return copy.deepcopy(item)

    def delete(self, item_id: int) -> None:
        with self._lock:
            if item_id not in self._items:
                raise NotFound(MESSAGE_ID_DOES_NOT_EXIST)
            del self._items[item_id]
            logger.info(f"Deleted item {item_id}")
