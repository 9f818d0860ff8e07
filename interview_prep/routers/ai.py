from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from interview_prep.config import Settings
from interview_prep.dependencies import get_llm_client, get_settings
from interview_prep.errors import PayloadTooLarge, ValidationError
from interview_prep.schemas import ConceptExplanation, ExplanationIn, QuestionAnswer, QuestionGenerationIn
from interview_prep.services.llm_service import LLMClient
from interview_prep.services.question_service import (
	explain_concept,
	generate_questions,
	generate_questions_from_document,
)
from interview_prep.utils.text_extract import extension_of


logger = logging.getLogger(__name__)

router = APIRouter()

DOCUMENT_CONTENT_TYPES = {
	"application/pdf",
	"application/vnd.openxmlformats-officedocument.wordprocessingml.document",  # .docx
	"application/msword",  # .doc
	"text/plain",
}
# Accepted by the client's file picker, but there is no text to extract from them
IMAGE_CONTENT_TYPES = {"image/jpeg", "image/png", "image/jpg"}


def check_upload_type(content_type: str | None) -> None:
	ctype = (content_type or "").split(";", 1)[0].strip().lower()
	if ctype in DOCUMENT_CONTENT_TYPES:
		return
	if ctype in IMAGE_CONTENT_TYPES:
		raise ValidationError("Image uploads are not supported. Please upload a .pdf, .doc, .docx or .txt file.")
	raise ValidationError("Only .pdf, .doc, .docx and .txt formats are allowed")


@router.post("/generate-questions", response_model=List[QuestionAnswer])
async def generate_interview_questions(payload: QuestionGenerationIn, client: LLMClient = Depends(get_llm_client)):
	return await generate_questions(client, payload)


@router.post("/generate-explanation", response_model=ConceptExplanation)
async def generate_concept_explanation(payload: ExplanationIn, client: LLMClient = Depends(get_llm_client)):
	return await explain_concept(client, payload.question)


@router.post("/generate-questions-from-resume", response_model=List[QuestionAnswer])
async def generate_questions_from_resume(
	file: Optional[UploadFile] = File(default=None),
	experience: Optional[str] = Form(default=None),
	job_title: Optional[str] = Form(default=None, alias="jobTitle"),
	number_of_questions: Optional[int] = Form(default=None, alias="numberOfQuestions", ge=1, le=50),
	client: LLMClient = Depends(get_llm_client),
	settings: Settings = Depends(get_settings),
):
	if file is None or not (experience or "").strip() or not (job_title or "").strip():
		raise ValidationError("Missing required fields or file")

	check_upload_type(file.content_type)
	# One byte past the limit is enough to know it is too large
	data = await file.read(settings.max_upload_bytes + 1)
	if len(data) > settings.max_upload_bytes:
		raise PayloadTooLarge(f"File exceeds the {settings.max_upload_bytes} byte upload limit")

	logger.info("Resume upload: filename=%r content_type=%s bytes=%d", file.filename, file.content_type, len(data))
	return await generate_questions_from_document(
		client,
		data,
		extension_of(file.filename),
		experience=experience,
		job_title=job_title,
		number_of_questions=number_of_questions or settings.resume_question_count,
		max_chars=settings.max_document_chars,
	)
