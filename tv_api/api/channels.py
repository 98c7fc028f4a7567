from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session
from typing import Annotated, List

from tv_api.core.database import get_db
from tv_api.repositories.channel_store import ChannelStore
from tv_api.services.channel_service import ChannelService
from tv_api.schemas.channel import (
    CHANNEL_ID_MAX,
    CHANNEL_ID_MIN,
    ChannelResponse,
    ChannelCreate,
    ChannelUpdate,
    MessageResponse,
)

router = APIRouter(prefix="/channels", tags=["Channels"])

NOT_FOUND = {404: {"description": "Channel not found"}}
INVALID = {400: {"description": "Invalid payload or duplicate id"}}

# Out-of-range ids are rejected as 400 before reaching the store
ChannelIdPath = Annotated[int, Path(ge=CHANNEL_ID_MIN, le=CHANNEL_ID_MAX)]


def get_channel_service(db: Session = Depends(get_db)) -> ChannelService:
    return ChannelService(ChannelStore(db))

# --- READ ALL (enabled only) ---
@router.get(
    "",
    response_model=List[ChannelResponse],
    response_model_exclude_none=True,
    summary="List enabled channels",
)
def list_channels(service: ChannelService = Depends(get_channel_service)):
    return service.list_enabled()

# --- READ ONE ---
@router.get(
    "/{id}",
    response_model=ChannelResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
    summary="Get a channel by id",
)
def get_channel(id: ChannelIdPath, service: ChannelService = Depends(get_channel_service)):
    return service.get_by_id(id)

# --- CREATE ---
@router.post(
    "",
    response_model=ChannelResponse,
    response_model_exclude_none=True,
    status_code=201,
    responses=INVALID,
    summary="Create a channel",
)
def create_channel(payload: ChannelCreate, service: ChannelService = Depends(get_channel_service)):
    return service.create(payload)

# --- UPDATE (partial) ---
@router.put(
    "/{id}",
    response_model=ChannelResponse,
    response_model_exclude_none=True,
    responses={**NOT_FOUND, 400: {"description": "Invalid payload"}},
    summary="Update a channel by id",
)
def update_channel(id: ChannelIdPath, payload: ChannelUpdate, service: ChannelService = Depends(get_channel_service)):
    return service.update(id, payload)

# --- DELETE ---
@router.delete(
    "/{id}",
    response_model=MessageResponse,
    responses=NOT_FOUND,
    summary="Delete a channel by id",
)
def delete_channel(id: ChannelIdPath, service: ChannelService = Depends(get_channel_service)):
    service.delete(id)
    return {"message": "Channel deleted successfully"}
