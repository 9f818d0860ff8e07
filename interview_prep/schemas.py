from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime


class CamelModel(BaseModel):
	# Client sends camelCase keys; python code reads snake_case attributes
	model_config = ConfigDict(populate_by_name=True)


class QuestionAnswer(BaseModel):
	question: str
	answer: str


class ConceptExplanation(BaseModel):
	title: str
	explanation: str


class QuestionGenerationIn(CamelModel):
	role: Optional[str] = None
	experience: Optional[str] = None
	topics_to_focus: Optional[str] = Field(default=None, alias="topicsToFocus")
	number_of_questions: Optional[int] = Field(default=None, alias="numberOfQuestions", ge=0, le=50)

	def is_complete(self) -> bool:
		return all(
			[
				(self.role or "").strip(),
				(self.experience or "").strip(),
				(self.topics_to_focus or "").strip(),
				self.number_of_questions,
			]
		)


class ExplanationIn(BaseModel):
	question: Optional[str] = None


class SessionCreateIn(CamelModel):
	role: Optional[str] = None
	experience: Optional[str] = None
	topics_to_focus: Optional[str] = Field(default=None, alias="topicsToFocus")
	description: Optional[str] = Field(default="", description="Free-form notes about the session")
	questions: List[QuestionAnswer] = Field(default_factory=list)


class AddQuestionsIn(CamelModel):
	session_id: Optional[str] = Field(default=None, alias="sessionId")
	questions: List[QuestionAnswer] = Field(default_factory=list)


class NoteIn(BaseModel):
	note: str = ""


class QuestionOut(CamelModel):
	id: str = Field(alias="_id")
	question: str
	answer: str
	note: str = ""
	is_pinned: bool = Field(default=False, alias="isPinned")
	created_at: datetime = Field(alias="createdAt")


class SessionOut(CamelModel):
	id: str = Field(alias="_id")
	role: str
	experience: str
	topics_to_focus: str = Field(alias="topicsToFocus")
	description: str = ""
	questions: List[QuestionOut]
	created_at: datetime = Field(alias="createdAt")
	updated_at: datetime = Field(alias="updatedAt")


class SessionSummary(CamelModel):
	id: str = Field(alias="_id")
	role: str
	experience: str
	topics_to_focus: str = Field(alias="topicsToFocus")
	description: str = ""
	question_count: int = Field(alias="questionCount")
	updated_at: datetime = Field(alias="updatedAt")


class SessionList(BaseModel):
	items: List[SessionSummary]
