from __future__ import annotations

import json
import logging
import re
from typing import Any, List

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from interview_prep.errors import MalformedResponse, SchemaMismatch
from interview_prep.schemas import ConceptExplanation, QuestionAnswer


logger = logging.getLogger(__name__)

# Outermost fenced region: first opening marker to the last closing one
FENCED_REGION = re.compile(r"```(?:json)?(.*)```", re.IGNORECASE | re.DOTALL)
LEADING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
TRAILING_FENCE = re.compile(r"\s*```$")

_question_list = TypeAdapter(List[QuestionAnswer])


def strip_code_fences(raw: str | None) -> str:
	"""Remove the Markdown fence wrapped around a JSON payload.

	Prose the model put before the first or after the last fence is dropped,
	unless the text already starts as JSON. A leftover leading or trailing
	marker (e.g. an unclosed block) is then removed. Fences inside string
	values, such as code samples in an answer, are kept as they are.
	"""
	text = (raw or "").strip()
	if not text.startswith(("[", "{")):
		match = FENCED_REGION.search(text)
		if match:
			text = match.group(1).strip()
	text = LEADING_FENCE.sub("", text)
	return TRAILING_FENCE.sub("", text).strip()


def normalize_response(raw: str | None) -> Any:
	"""Turn raw model text into parsed JSON.

	Raises MalformedResponse carrying the cleaned text and the parser message.
	"""
	cleaned = strip_code_fences(raw)
	try:
		return json.loads(cleaned)
	except json.JSONDecodeError as exc:
		logger.warning("Model output is not valid JSON (%s): %.500s", exc.msg, cleaned)
		raise MalformedResponse(cleaned, str(exc)) from exc


def parse_question_list(raw: str | None) -> List[QuestionAnswer]:
	data = normalize_response(raw)
	# Some models wrap the array: {"questions": [...]}
	if isinstance(data, dict) and isinstance(data.get("questions"), list):
		data = data["questions"]
	try:
		return _question_list.validate_python(data)
	except PydanticValidationError as exc:
		logger.warning("Model output has the wrong shape for a question list: %s", exc)
		raise SchemaMismatch("a list of question/answer pairs", str(exc), data) from exc


def parse_explanation(raw: str | None) -> ConceptExplanation:
	data = normalize_response(raw)
	try:
		return ConceptExplanation.model_validate(data)
	except PydanticValidationError as exc:
		logger.warning("Model output has the wrong shape for an explanation: %s", exc)
		raise SchemaMismatch("an explanation object", str(exc), data) from exc
