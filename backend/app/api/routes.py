import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.auth import get_current_user_id
from app.api.serializers import serialize_session
from app.config import get_settings
from app.db import repository
from app.db.session import get_db
from app.generation.classifier import classify_request
from app.llm.remote_generator import RemoteGenerator
from app.pipeline.controller import GenerationPipeline
from app.schemas import (
    CreateSessionRequest,
    GenerateRequest,
    GenerateResponse,
    SessionOut,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_generation_pipeline() -> GenerationPipeline:
    settings = get_settings()
    return GenerationPipeline(remote=RemoteGenerator(settings.provider_configs()))


def _acknowledgment(prompt: str, is_iterative: bool) -> str:
    if is_iterative:
        return (
            f'I\'ve updated the component based on your request: "{prompt}". '
            "The component has been modified with the new styling and properties."
        )
    return (
        f'I\'ve generated a React component based on your request: "{prompt}". '
        "The component includes both JSX and CSS styling."
    )


@router.get("/health")
def health():
    return {"status": "ok"}


@router.post("/sessions", response_model=SessionOut, status_code=201)
def create_session(
    request: CreateSessionRequest,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    session = repository.create_session(db, user_id=user_id, title=request.title)
    logger.info("Created session %s for user %s", session.id, user_id)
    return serialize_session(session)


@router.get("/sessions/{session_id}", response_model=SessionOut)
def get_session(
    session_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    session = repository.find_session(db, session_id, user_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return serialize_session(session)


@router.post("/generate", response_model=GenerateResponse)
def generate_component(
    request: Optional[GenerateRequest] = None,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    pipeline: GenerationPipeline = Depends(get_generation_pipeline),
):
    # A missing body counts as both fields missing
    prompt = request.prompt if request else None
    session_id = request.session_id if request else None

    if not prompt or not session_id:
        raise HTTPException(status_code=400, detail="Prompt and sessionId are required")

    session = repository.find_session(db, session_id, user_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")

    try:
        current = session.current_artifact
        classification = classify_request(prompt, current)
        is_iterative = classification.is_iterative

        logger.info("Request analysis: prompt=%r %s", prompt, classification.to_dict())

        # ============================
        # 1️⃣ GENERATION (context only for refinements)
        # ============================
        context = current if is_iterative else None
        result = pipeline.run(prompt, context)
        if result.needs_fallback:
            raise RuntimeError(f"No component produced: {result.reason}")
        artifact = result.artifact

        # ============================
        # 2️⃣ SESSION UPDATE
        # ============================
        repository.append_message(session, "user", prompt)
        repository.append_message(session, "assistant", _acknowledgment(prompt, is_iterative))
        repository.set_current_artifact(session, artifact)

        db.commit()
        db.refresh(session)

        logger.info(
            "Component generated successfully: session=%s iterative=%s source=%s",
            session.id,
            is_iterative,
            result.source,
        )

        return GenerateResponse(
            message=(
                "Component updated successfully"
                if is_iterative
                else "Component generated successfully"
            ),
            session=serialize_session(session),
            is_iterative=is_iterative,
        )

    except Exception:
        logger.exception("Error in /generate route")
        db.rollback()
        raise HTTPException(status_code=500, detail="Failed to generate component")
