from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Tuple
import asyncio
import json
import logging
import uuid
from pathlib import Path

from interview_prep.errors import NotFoundError


logger = logging.getLogger(__name__)


def _now() -> datetime:
	return datetime.now(timezone.utc)


def _parse_dt(value) -> datetime:
	if isinstance(value, str):
		try:
			return datetime.fromisoformat(value)
		except ValueError:
			pass
	return _now()


@dataclass
class StoredQuestion:
	question: str
	answer: str
	id: str = field(default_factory=lambda: str(uuid.uuid4()))
	note: str = ""
	is_pinned: bool = False
	created_at: datetime = field(default_factory=_now)


@dataclass
class InterviewSession:
	role: str
	experience: str
	topics_to_focus: str
	description: str = ""
	id: str = field(default_factory=lambda: str(uuid.uuid4()))
	questions: List[StoredQuestion] = field(default_factory=list)
	created_at: datetime = field(default_factory=_now)
	updated_at: datetime = field(default_factory=_now)

	def ordered_questions(self) -> List[StoredQuestion]:
		"""Pinned questions first, then oldest to newest."""
		return sorted(self.questions, key=lambda q: (not q.is_pinned, q.created_at))


class SessionManager:
	"""Keeps interview sessions in memory and mirrors each one to a JSON file."""

	def __init__(self, data_dir: str | Path = "data/sessions") -> None:
		self._sessions: Dict[str, InterviewSession] = {}
		self._lock = asyncio.Lock()
		self._data_dir = Path(data_dir)
		self._data_dir.mkdir(parents=True, exist_ok=True)
		self._load_all()

	def _session_path(self, session_id: str) -> Path:
		return self._data_dir / f"{session_id}.json"

	def _serialize(self, session: InterviewSession) -> dict:
		data = asdict(session)
		data["created_at"] = session.created_at.isoformat()
		data["updated_at"] = session.updated_at.isoformat()
		for raw, q in zip(data["questions"], session.questions):
			raw["created_at"] = q.created_at.isoformat()
		return data

	def _deserialize(self, data: dict) -> InterviewSession:
		questions = [
			StoredQuestion(
				id=q["id"],
				question=q.get("question", ""),
				answer=q.get("answer", ""),
				note=q.get("note", ""),
				is_pinned=bool(q.get("is_pinned", False)),
				created_at=_parse_dt(q.get("created_at")),
			)
			for q in data.get("questions", [])
		]
		return InterviewSession(
			id=data["id"],
			role=data.get("role", ""),
			experience=data.get("experience", ""),
			topics_to_focus=data.get("topics_to_focus", ""),
			description=data.get("description", ""),
			questions=questions,
			created_at=_parse_dt(data.get("created_at")),
			updated_at=_parse_dt(data.get("updated_at")),
		)

	def _load_all(self) -> None:
		for p in self._data_dir.glob("*.json"):
			try:
				with p.open("r", encoding="utf-8") as f:
					session = self._deserialize(json.load(f))
			except (OSError, ValueError, KeyError) as exc:
				logger.warning("Skipping unreadable session file %s: %s", p, exc)
				continue
			self._sessions[session.id] = session
		logger.info("Loaded %d sessions from %s", len(self._sessions), self._data_dir)

	def _save(self, session: InterviewSession) -> None:
		path = self._session_path(session.id)
		with path.open("w", encoding="utf-8") as f:
			json.dump(self._serialize(session), f, ensure_ascii=False, indent=2)

	async def create_session(
		self,
		role: str,
		experience: str,
		topics_to_focus: str,
		description: str = "",
		questions: Iterable[Tuple[str, str]] = (),
	) -> InterviewSession:
		async with self._lock:
			session = InterviewSession(
				role=role,
				experience=experience,
				topics_to_focus=topics_to_focus,
				description=description or "",
				questions=[StoredQuestion(question=q, answer=a) for q, a in questions],
			)
			self._sessions[session.id] = session
			self._save(session)
			return session

	async def get(self, session_id: str) -> Optional[InterviewSession]:
		return self._sessions.get(session_id)

	async def get_required(self, session_id: str) -> InterviewSession:
		session = await self.get(session_id)
		if session is None:
			raise NotFoundError("Session not found")
		return session

	async def list_sessions(self) -> List[InterviewSession]:
		"""Newest first."""
		return sorted(self._sessions.values(), key=lambda s: s.updated_at, reverse=True)

	async def delete_session(self, session_id: str) -> bool:
		"""Delete a session and its persisted file. Returns True if deleted."""
		async with self._lock:
			session = self._sessions.pop(session_id, None)
			path = self._session_path(session_id)
			if path.exists():
				path.unlink()
			return session is not None

	async def add_questions(self, session_id: str, questions: Iterable[Tuple[str, str]]) -> List[StoredQuestion]:
		async with self._lock:
			session = await self.get_required(session_id)
			added = [StoredQuestion(question=q, answer=a) for q, a in questions]
			session.questions.extend(added)
			session.updated_at = _now()
			self._save(session)
			return added

	def _find_question(self, question_id: str) -> Tuple[InterviewSession, StoredQuestion]:
		for session in self._sessions.values():
			for q in session.questions:
				if q.id == question_id:
					return session, q
		raise NotFoundError("Question not found")

	async def toggle_pin(self, question_id: str) -> StoredQuestion:
		async with self._lock:
			session, question = self._find_question(question_id)
			question.is_pinned = not question.is_pinned
			session.updated_at = _now()
			self._save(session)
			return question

	async def update_note(self, question_id: str, note: str) -> StoredQuestion:
		async with self._lock:
			session, question = self._find_question(question_id)
			question.note = note
			session.updated_at = _now()
			self._save(session)
			return question
