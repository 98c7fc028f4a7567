from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tv_api.models.channel import Channel


class DuplicateChannelId(Exception):
    """The store's uniqueness constraint on ``channels.id`` rejected an insert."""

    def __init__(self, channel_id: int):
        self.channel_id = channel_id
        super().__init__(f"channel id {channel_id} already exists")


class ChannelStore:
    """
    Persistence for channel rows. No business rules live here: callers get
    rows back or ``None``/``False``, and driver errors propagate untouched
    (apart from the unique-key violation on insert).
    """

    def __init__(self, db: Session):
        self.db = db

    def find_enabled(self) -> List[Channel]:
        return self.db.query(Channel).filter(Channel.enabled.is_(True)).all()

    def find_by_id(self, channel_id: int) -> Optional[Channel]:
        return self.db.get(Channel, channel_id)

    def insert(self, fields: dict) -> Channel:
        # No lookup first: the primary key decides, atomically, who wins
        channel = Channel(**fields)
        self.db.add(channel)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateChannelId(fields["id"])
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(channel)
        return channel

    def update_fields(self, channel_id: int, fields: dict) -> Optional[Channel]:
        """Write exactly the given columns. Returns None if the row is gone."""
        try:
            updated = (
                self.db.query(Channel)
                .filter(Channel.id == channel_id)
                .update(fields, synchronize_session=False)
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        if not updated:
            return None

        # Drop any stale identity-map copy before reading back
        self.db.expire_all()
        return self.find_by_id(channel_id)

    def delete(self, channel_id: int) -> bool:
        try:
            deleted = self.db.query(Channel).filter(Channel.id == channel_id).delete(synchronize_session=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return deleted > 0
