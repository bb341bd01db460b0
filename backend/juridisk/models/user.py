from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from ..core.database import Base
from ..utils import get_current_timestamp


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=get_current_timestamp, nullable=False)

    chats = relationship("Chat", back_populates="owner", cascade="all, delete-orphan", passive_deletes=True)
