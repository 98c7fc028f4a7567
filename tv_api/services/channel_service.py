import logging
from typing import List, Union

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from tv_api.core.errors import (
    ConflictError,
    InvalidError,
    NotFoundError,
    UnavailableError,
    describe_validation_errors,
)
from tv_api.models.channel import Channel
from tv_api.repositories.channel_store import ChannelStore, DuplicateChannelId
from tv_api.schemas.channel import CHANNEL_ID_MAX, CHANNEL_ID_MIN, ChannelCreate, ChannelUpdate

logger = logging.getLogger(__name__)


def merge_channel_fields(current: dict, changes: dict) -> dict:
    """
    Field-level merge of a sparse change set into a channel document.

    A key present in ``changes`` wins even when its value is falsy
    (``False``, ``[]``, ``""``); a key that is absent keeps the current value.
    """
    merged = dict(current)
    for key, value in changes.items():
        merged[key] = value
    return merged


class ChannelService:
    def __init__(self, store: ChannelStore):
        self.store = store

    # ---------------------------------------------------------
    # PARSING
    # ---------------------------------------------------------
    def _parse(self, schema, data: Union[BaseModel, dict]):
        if isinstance(data, schema):
            return data
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise InvalidError(describe_validation_errors(e.errors()))

    def _storable_id(self, channel_id: int) -> int:
        # No row can hold an id outside the column range
        if not CHANNEL_ID_MIN <= channel_id <= CHANNEL_ID_MAX:
            raise NotFoundError()
        return channel_id

    def _unavailable(self, action: str, e: SQLAlchemyError) -> UnavailableError:
        logger.error(f"❌ Store error while trying to {action}: {e}")
        return UnavailableError()

    # ---------------------------------------------------------
    # READ
    # ---------------------------------------------------------
    def list_enabled(self) -> List[Channel]:
        try:
            return self.store.find_enabled()
        except SQLAlchemyError as e:
            raise self._unavailable("list channels", e)

    def get_by_id(self, channel_id: int) -> Channel:
        self._storable_id(channel_id)
        try:
            channel = self.store.find_by_id(channel_id)
        except SQLAlchemyError as e:
            raise self._unavailable(f"load channel {channel_id}", e)

        if channel is None:
            raise NotFoundError()
        return channel

    # ---------------------------------------------------------
    # CREATE
    # ---------------------------------------------------------
    def create(self, payload: Union[ChannelCreate, dict]) -> Channel:
        data = self._parse(ChannelCreate, payload)

        try:
            channel = self.store.insert(data.model_dump())
        except DuplicateChannelId:
            logger.warning(f"⚠️ Rejected create: channel {data.id} already exists")
            raise ConflictError(f"A channel with id {data.id} already exists")
        except SQLAlchemyError as e:
            raise self._unavailable(f"create channel {data.id}", e)

        logger.info(f"✅ Created channel {channel.id} ({channel.name})")
        return channel

    # ---------------------------------------------------------
    # UPDATE
    # ---------------------------------------------------------
    def update(self, channel_id: int, payload: Union[ChannelUpdate, dict]) -> Channel:
        data = self._parse(ChannelUpdate, payload)
        changes = data.changes()

        # id is immutable: it may be echoed back, never changed
        if "id" in changes:
            if changes.pop("id") != channel_id:
                raise InvalidError("'id' cannot be changed")

        current = self.get_by_id(channel_id)
        if not changes:
            return current

        merged = merge_channel_fields(current.to_dict(), changes)
        merged.pop("id")

        try:
            channel = self.store.update_fields(channel_id, merged)
        except SQLAlchemyError as e:
            raise self._unavailable(f"update channel {channel_id}", e)

        # Deleted between read and write
        if channel is None:
            raise NotFoundError()

        logger.info(f"✏️ Updated channel {channel_id}: {sorted(changes)}")
        return channel

    # ---------------------------------------------------------
    # DELETE
    # ---------------------------------------------------------
    def delete(self, channel_id: int) -> None:
        self._storable_id(channel_id)
        try:
            deleted = self.store.delete(channel_id)
        except SQLAlchemyError as e:
            raise self._unavailable(f"delete channel {channel_id}", e)

        if not deleted:
            logger.warning(f"⚠️ Delete of unknown channel {channel_id}")
            raise NotFoundError()

        logger.info(f"🗑️ Deleted channel {channel_id}")
