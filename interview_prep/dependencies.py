from fastapi import Request

from interview_prep.config import Settings
from interview_prep.errors import ConfigurationError
from interview_prep.services.llm_service import LLMClient
from interview_prep.services.session_manager import SessionManager


def get_settings(request: Request) -> Settings:
	return request.app.state.settings


def get_llm_client(request: Request) -> LLMClient:
	client = getattr(request.app.state, "llm_client", None)
	if client is None:
		# Only reachable when the lifespan did not run
		raise ConfigurationError("LLM client is not configured")
	return client


def get_session_manager(request: Request) -> SessionManager:
	return request.app.state.session_manager
