from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol

import anyio
import google.generativeai as genai
from groq import Groq

from interview_prep.config import Settings
from interview_prep.errors import ConfigurationError, UpstreamError


logger = logging.getLogger(__name__)


class LLMClient(Protocol):
	"""What request handlers need from a generative-AI provider."""

	provider: str
	model: str

	async def generate(self, prompt: str) -> str: ...


class GeminiClient:
	provider = "gemini"

	def __init__(self, api_key: str, model: str, *, temperature: float = 0.7, timeout: Optional[float] = None) -> None:
		genai.configure(api_key=api_key)
		self.model = model
		self._model = genai.GenerativeModel(model)
		self._generation_config = {"temperature": temperature}
		self._request_options: Dict[str, Any] = {"timeout": timeout} if timeout else {}

	def _call(self, prompt: str) -> str:
		resp = self._model.generate_content(
			prompt,
			generation_config=self._generation_config,
			request_options=self._request_options or None,
		)
		text = getattr(resp, "text", None)
		if text:
			return text
		candidates = getattr(resp, "candidates", None)
		if candidates:
			return "".join(getattr(part, "text", "") for part in candidates[0].content.parts)
		return ""

	async def generate(self, prompt: str) -> str:
		try:
			return await anyio.to_thread.run_sync(self._call, prompt)
		except Exception as exc:
			logger.error("Gemini request failed (model=%s): %s", self.model, exc)
			raise UpstreamError(str(exc), provider=self.provider) from exc


class GroqClient:
	provider = "groq"

	def __init__(self, api_key: str, model: str, *, temperature: float = 0.7, timeout: Optional[float] = None) -> None:
		kwargs: Dict[str, Any] = {"api_key": api_key}
		if timeout:
			kwargs["timeout"] = timeout
		self._client = Groq(**kwargs)
		self.model = model
		self._temperature = temperature

	def _call(self, prompt: str) -> str:
		resp = self._client.chat.completions.create(
			model=self.model,
			messages=[{"role": "user", "content": prompt}],
			temperature=self._temperature,
		)
		return resp.choices[0].message.content or ""

	async def generate(self, prompt: str) -> str:
		try:
			return await anyio.to_thread.run_sync(self._call, prompt)
		except Exception as exc:
			logger.error("Groq request failed (model=%s): %s", self.model, exc)
			raise UpstreamError(str(exc), provider=self.provider) from exc


def build_llm_client(settings: Settings) -> LLMClient:
	"""Create the single provider client the process shares across requests.

	Raises ConfigurationError when the selected provider has no API key.
	"""
	provider = settings.llm_provider
	if provider == "gemini":
		if not settings.gemini_api_key:
			raise ConfigurationError("GEMINI_API_KEY is not set")
		client: LLMClient = GeminiClient(
			settings.gemini_api_key,
			settings.gemini_model,
			temperature=settings.generation_temperature,
			timeout=settings.llm_timeout_seconds,
		)
	elif provider == "groq":
		if not settings.groq_api_key:
			raise ConfigurationError("GROQ_API_KEY is not set")
		client = GroqClient(
			settings.groq_api_key,
			settings.groq_model,
			temperature=settings.generation_temperature,
			timeout=settings.llm_timeout_seconds,
		)
	else:
		raise ConfigurationError(f"Unknown LLM provider: {provider!r} (expected 'gemini' or 'groq')")

	logger.info("LLM client ready: provider=%s model=%s", client.provider, client.model)
	return client
