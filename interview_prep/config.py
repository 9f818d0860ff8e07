from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import field_validator
from typing import Annotated, List
from dotenv import load_dotenv


# Ensure .env is loaded eagerly
load_dotenv(dotenv_path=".env")


class Settings(BaseSettings):
	model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_ignore_empty=True, extra="ignore")

	# Server
	host: str = "0.0.0.0"
	port: int = 8000
	cors_allow_origins: Annotated[List[str], NoDecode] = [
		"http://localhost:3000",
		"http://localhost:5173",
		"http://127.0.0.1:3000",
		"http://127.0.0.1:5173",
	]

	# Auth
	api_key: str | None = None  # simple bearer key if provided

	# LLM Provider Selection
	llm_provider: str = "gemini"  # options: gemini, groq

	# Google Gemini
	gemini_api_key: str | None = None
	gemini_model: str = "gemini-2.0-flash-lite"

	# Groq
	groq_api_key: str | None = None
	groq_model: str = "llama-3.3-70b-versatile"

	generation_temperature: float = 0.7
	llm_timeout_seconds: float | None = None  # None keeps the SDK default

	# Generation limits
	max_document_chars: int = 3000
	resume_question_count: int = 10
	max_upload_bytes: int = 5 * 1024 * 1024

	# Session persistence
	data_dir: str = "data/sessions"

	# Logging
	log_level: str = "INFO"

	@field_validator("generation_temperature")
	@classmethod
	def clamp_temperature(cls, v: float) -> float:
		return max(0.0, min(1.0, v))

	@field_validator("llm_provider")
	@classmethod
	def normalize_provider(cls, v: str) -> str:
		return (v or "gemini").strip().lower()

	@field_validator("cors_allow_origins", mode="before")
	@classmethod
	def parse_cors_origins(cls, v):
		# Allow environment variable override
		if isinstance(v, str):
			return [origin.strip() for origin in v.split(",") if origin.strip()]
		return v

	@property
	def active_model(self) -> str:
		return self.groq_model if self.llm_provider == "groq" else self.gemini_model


settings = Settings()
