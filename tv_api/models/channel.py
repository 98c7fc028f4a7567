from sqlalchemy import Column, BigInteger, Text, Boolean, JSON
from tv_api.core.database import Base

class Channel(Base):
    __tablename__ = "channels"

    # Assigned by the caller, never generated. The primary key is what
    # keeps two creates with the same id from both landing.
    id = Column(BigInteger, primary_key=True, autoincrement=False)

    name = Column(Text, nullable=False)
    url = Column(Text, nullable=False) # stream / playback URL
    logo_url = Column("logoUrl", Text, nullable=True)

    enabled = Column(Boolean, nullable=False, default=True, index=True)

    # Ordered list of category names, e.g. ["news", "sports"]
    category = Column(JSON, nullable=False, default=list)

    def to_dict(self):
        return {c.key: getattr(self, c.key) for c in self.__mapper__.column_attrs}
