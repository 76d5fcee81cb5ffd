# routers/items.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from typing import Optional, Dict, Any
import json
import logging
import math

from services.inventory_service import (
    Inventory,
    ItemUpdate,
    BadRequest,
    MESSAGE_INVALID_JSON,
    MESSAGE_DELETED,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["items"])


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"{text} is out of range")
    return value


def get_inventory(request: Request) -> Inventory:
    """The Inventory owned by the running application"""
    return request.app.state.inventory


async def read_json_object(request: Request) -> Dict[str, Any]:
    """Parse the request body as a JSON object or reject it as invalid JSON"""
    body = await request.body()
    try:
        payload = json.loads(body, parse_float=_finite_float, parse_constant=_reject_constant)
    except ValueError:
        logger.warning(f"Rejected body on {request.url.path}: not JSON")
        raise BadRequest(MESSAGE_INVALID_JSON)
    if not isinstance(payload, dict):
        logger.warning(f"Rejected body on {request.url.path}: not a JSON object")
        raise BadRequest(MESSAGE_INVALID_JSON)
    return payload


@router.get("/get-item/{item_id}")
def get_item(item_id: int, name: Optional[str] = None, inventory: Inventory = Depends(get_inventory)):
    logger.info(f"Get item {item_id} (name filter: {name})")
    return inventory.get(item_id, name)


@router.post("/create-item/{item_id}")
async def create_item(item_id: int, request: Request, inventory: Inventory = Depends(get_inventory)):
    item = await read_json_object(request)
    return inventory.create(item_id, item)


@router.put("/update-item/{item_id}")
async def update_item(item_id: int, request: Request, inventory: Inventory = Depends(get_inventory)):
    payload = await read_json_object(request)
    try:
        update = ItemUpdate.from_payload(payload)
    except ValidationError as e:
        logger.warning(f"Rejected update for item {item_id}: {e.error_count()} invalid field(s)")
        raise BadRequest(MESSAGE_INVALID_JSON)
    return inventory.update(item_id, update)


@router.delete("/delete-item/{item_id}", response_class=PlainTextResponse)
def delete_item(item_id: int, inventory: Inventory = Depends(get_inventory)):
    inventory.delete(item_id)
    return MESSAGE_DELETED
