import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

from app.generation.artifact import Artifact

Base = declarative_base()


def _new_id() -> str:
    return uuid.uuid4().hex


class ChatSession(Base):
    __tablename__ = "chat_sessions"

    id = Column(String(32), primary_key=True, default=_new_id)
    user_id = Column(String(255), nullable=False, index=True)
    title = Column(String(255), nullable=False, default="Untitled session")

    # Current artifact slot; both set or both empty
    current_jsx = Column(Text)
    current_css = Column(Text)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    messages = relationship(
        "ChatMessage",
        back_populates="session",
        order_by="ChatMessage.position",
        cascade="all, delete-orphan",
    )

    @property
    def current_artifact(self):
        return Artifact.from_fields(self.current_jsx, self.current_css)


class ChatMessage(Base):
    __tablename__ = "chat_messages"

    id = Column(Integer, primary_key=True)
    session_id = Column(String(32), ForeignKey("chat_sessions.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    role = Column(String(16), nullable=False)
    content = Column(Text, nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False)

    session = relationship("ChatSession", back_populates="messages")
