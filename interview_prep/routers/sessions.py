from __future__ import annotations

from fastapi import APIRouter, Depends

from interview_prep.dependencies import get_session_manager
from interview_prep.errors import NotFoundError, ValidationError
from interview_prep.schemas import (
	AddQuestionsIn,
	NoteIn,
	QuestionOut,
	SessionCreateIn,
	SessionList,
	SessionOut,
	SessionSummary,
)
from interview_prep.services.session_manager import InterviewSession, SessionManager, StoredQuestion


sessions_router = APIRouter()
questions_router = APIRouter()


def _question_out(q: StoredQuestion) -> QuestionOut:
	return QuestionOut(
		id=q.id,
		question=q.question,
		answer=q.answer,
		note=q.note,
		is_pinned=q.is_pinned,
		created_at=q.created_at,
	)


def _session_out(s: InterviewSession) -> SessionOut:
	return SessionOut(
		id=s.id,
		role=s.role,
		experience=s.experience,
		topics_to_focus=s.topics_to_focus,
		description=s.description,
		questions=[_question_out(q) for q in s.ordered_questions()],
		created_at=s.created_at,
		updated_at=s.updated_at,
	)


@sessions_router.post("/create", status_code=201)
async def create_session(payload: SessionCreateIn, manager: SessionManager = Depends(get_session_manager)):
	if not (payload.role or "").strip() or not (payload.experience or "").strip() or not (payload.topics_to_focus or "").strip():
		raise ValidationError("Missing required fields")
	session = await manager.create_session(
		role=payload.role.strip(),
		experience=payload.experience.strip(),
		topics_to_focus=payload.topics_to_focus.strip(),
		description=payload.description or "",
		questions=[(q.question, q.answer) for q in payload.questions],
	)
	return {"session": _session_out(session).model_dump(by_alias=True, mode="json")}


@sessions_router.get("/my-sessions", response_model=SessionList)
async def list_sessions(manager: SessionManager = Depends(get_session_manager)):
	items = [
		SessionSummary(
			id=s.id,
			role=s.role,
			experience=s.experience,
			topics_to_focus=s.topics_to_focus,
			description=s.description,
			question_count=len(s.questions),
			updated_at=s.updated_at,
		)
		for s in await manager.list_sessions()
	]
	return SessionList(items=items)


@sessions_router.get("/{session_id}")
async def get_session(session_id: str, manager: SessionManager = Depends(get_session_manager)):
	session = await manager.get_required(session_id)
	return {"session": _session_out(session).model_dump(by_alias=True, mode="json")}


@sessions_router.delete("/{session_id}")
async def delete_session(session_id: str, manager: SessionManager = Depends(get_session_manager)):
	if not await manager.delete_session(session_id):
		raise NotFoundError("Session not found")
	return {"message": "Session deleted successfully"}


@questions_router.post("/add", status_code=201)
async def add_questions_to_session(payload: AddQuestionsIn, manager: SessionManager = Depends(get_session_manager)):
	if not (payload.session_id or "").strip() or not payload.questions:
		raise ValidationError("Missing required fields")
	added = await manager.add_questions(payload.session_id, [(q.question, q.answer) for q in payload.questions])
	return {"questions": [_question_out(q).model_dump(by_alias=True, mode="json") for q in added]}


@questions_router.post("/{question_id}/pin")
async def toggle_pin(question_id: str, manager: SessionManager = Depends(get_session_manager)):
	question = await manager.toggle_pin(question_id)
	return {"question": _question_out(question).model_dump(by_alias=True, mode="json")}


@questions_router.post("/{question_id}/note")
async def update_note(question_id: str, payload: NoteIn, manager: SessionManager = Depends(get_session_manager)):
	question = await manager.update_note(question_id, payload.note)
	return {"question": _question_out(question).model_dump(by_alias=True, mode="json")}
