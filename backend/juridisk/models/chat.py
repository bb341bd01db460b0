from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship
from ..core.database import Base
from ..utils import get_current_timestamp, DEFAULT_CHAT_TITLE, TITLE_MAX_LENGTH


class Chat(Base):
    __tablename__ = "chats"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(TITLE_MAX_LENGTH), nullable=False, default=DEFAULT_CHAT_TITLE)
    created_at = Column(DateTime(timezone=True), default=get_current_timestamp, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=get_current_timestamp, nullable=False)

    owner = relationship("User", back_populates="chats")
    # Rows are removed by the ON DELETE CASCADE foreign key, not by the ORM
    messages = relationship(
        "ChatMessage",
        back_populates="chat",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ChatMessage.order",
    )

    __table_args__ = (
        {"sqlite_autoincrement": True},
    )


class ChatMessage(Base):
    __tablename__ = "chat_messages"

    id = Column(Integer, primary_key=True, index=True)
    chat_id = Column(Integer, ForeignKey("chats.id", ondelete="CASCADE"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    is_user = Column(Boolean, nullable=False)
    order = Column("order", Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=get_current_timestamp, nullable=False)

    chat = relationship("Chat", back_populates="messages")

    __table_args__ = (
        UniqueConstraint("chat_id", "order", name="uq_chat_messages_chat_order"),
        {"sqlite_autoincrement": True},
    )
