from app.db.models import ChatSession
from app.schemas import CodeOut, MessageOut, SessionOut


def serialize_session(session: ChatSession) -> SessionOut:
    """
    Convert a stored session into its response shape.
    Messages keep their stored order.
    """
    artifact = session.current_artifact

    return SessionOut(
        id=session.id,
        user_id=session.user_id,
        title=session.title,
        messages=[
            MessageOut(
                role=message.role,
                content=message.content,
                timestamp=message.timestamp,
            )
            for message in session.messages
        ],
        current_code=CodeOut(**artifact.to_dict()) if artifact else None,
        created_at=session.created_at,
        updated_at=session.updated_at,
    )
