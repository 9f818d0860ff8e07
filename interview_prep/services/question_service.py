from __future__ import annotations

import logging
from typing import List

from interview_prep.errors import ValidationError
from interview_prep.schemas import ConceptExplanation, QuestionAnswer, QuestionGenerationIn
from interview_prep.services.llm_service import LLMClient
from interview_prep.services.normalizer import parse_explanation, parse_question_list
from interview_prep.services.prompts import (
	concept_explain_prompt,
	question_answer_prompt,
	resume_based_question_prompt,
)
from interview_prep.utils.text_extract import DEFAULT_MAX_CHARS, extract_document_text


logger = logging.getLogger(__name__)

MISSING_FIELDS = "Missing required fields"


async def generate_questions(client: LLMClient, payload: QuestionGenerationIn) -> List[QuestionAnswer]:
	if not payload.is_complete():
		raise ValidationError(MISSING_FIELDS)

	prompt = question_answer_prompt(
		payload.role,
		payload.experience,
		payload.topics_to_focus,
		payload.number_of_questions,
	)
	raw = await client.generate(prompt)
	questions = parse_question_list(raw)
	logger.info(
		"Generated %d questions for role=%r (requested %d)",
		len(questions), payload.role, payload.number_of_questions,
	)
	return questions


async def explain_concept(client: LLMClient, question: str | None) -> ConceptExplanation:
	if not (question or "").strip():
		raise ValidationError(MISSING_FIELDS)

	raw = await client.generate(concept_explain_prompt(question))
	return parse_explanation(raw)


async def generate_questions_from_document(
	client: LLMClient,
	data: bytes,
	extension: str,
	*,
	experience: str | None,
	job_title: str | None,
	number_of_questions: int = 10,
	max_chars: int = DEFAULT_MAX_CHARS,
) -> List[QuestionAnswer]:
	"""Extract the uploaded document, then generate questions grounded in it.

	Extraction errors (unsupported type, unreadable file) surface before any
	provider call is made.
	"""
	if not data or not (experience or "").strip() or not (job_title or "").strip():
		raise ValidationError("Missing required fields or file")

	document_text = extract_document_text(data, extension, limit=max_chars)
	if not document_text.strip():
		raise ValidationError("Uploaded file appears empty.")

	prompt = resume_based_question_prompt(document_text, experience, job_title, number_of_questions)
	raw = await client.generate(prompt)
	questions = parse_question_list(raw)
	logger.info(
		"Generated %d questions from a .%s document for job_title=%r",
		len(questions), extension, job_title,
	)
	return questions
