from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from app.db.models import ChatMessage, ChatSession
from app.generation.artifact import Artifact


def create_session(db: Session, user_id: str, title: Optional[str] = None) -> ChatSession:
    session = ChatSession(user_id=user_id, title=title or "Untitled session")
    db.add(session)
    db.commit()
    db.refresh(session)
    return session


def find_session(db: Session, session_id: str, user_id: str) -> Optional[ChatSession]:
    """Look a session up by id, scoped to its owner."""
    return (
        db.query(ChatSession)
        .filter(ChatSession.id == session_id, ChatSession.user_id == user_id)
        .first()
    )


def append_message(session: ChatSession, role: str, content: str) -> ChatMessage:
    message = ChatMessage(
        role=role,
        content=content,
        position=len(session.messages),
        timestamp=datetime.now(timezone.utc),
    )
    session.messages.append(message)
    return message


def set_current_artifact(session: ChatSession, artifact: Artifact) -> None:
    session.current_jsx = artifact.jsx
    session.current_css = artifact.css
