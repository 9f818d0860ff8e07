from __future__ import annotations

from typing import Any, Dict, Optional


class InterviewPrepError(Exception):
	"""Base error for everything the service reports to its callers.

	Each subclass fixes the HTTP status it maps to; the exception handler in
	``interview_prep.main`` turns ``to_dict()`` into the response body.
	"""

	status_code: int = 500

	def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None, status_code: Optional[int] = None) -> None:
		super().__init__(message)
		self.message = message
		self.details = details or {}
		if status_code is not None:
			self.status_code = status_code

	def to_dict(self) -> Dict[str, Any]:
		return {"message": self.message, **self.details}


class ConfigurationError(InterviewPrepError):
	pass


class ValidationError(InterviewPrepError):
	status_code = 400


class UnsupportedFileType(ValidationError):
	def __init__(self, extension: str) -> None:
		super().__init__("Unsupported file type", details={"extension": extension})
		self.extension = extension


class PayloadTooLarge(ValidationError):
	status_code = 413


class DocumentDecodeError(InterviewPrepError):
	status_code = 415


class NotFoundError(InterviewPrepError):
	status_code = 404


class UpstreamError(InterviewPrepError):
	"""The AI provider call failed (network, quota, rejected request)."""

	def __init__(self, message: str, *, provider: str) -> None:
		super().__init__("Failed to generate content", details={"error": message, "provider": provider})
		self.provider = provider
		self.upstream_message = message


class MalformedResponse(InterviewPrepError):
	"""The cleaned model output is not valid JSON."""

	def __init__(self, cleaned_text: str, parser_message: str) -> None:
		super().__init__(
			"AI provider returned invalid JSON.",
			details={"error": parser_message, "raw": cleaned_text},
		)
		self.cleaned_text = cleaned_text
		self.parser_message = parser_message


class SchemaMismatch(InterviewPrepError):
	"""Valid JSON whose shape does not match what was asked for."""

	def __init__(self, expected: str, parser_message: str, payload: Any) -> None:
		super().__init__(
			f"AI provider returned JSON that is not {expected}.",
			details={"error": parser_message, "raw": payload},
		)
		self.expected = expected
