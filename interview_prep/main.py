from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from interview_prep.config import Settings, settings as default_settings
from interview_prep.errors import InterviewPrepError
from interview_prep.routers.ai import router as ai_router
from interview_prep.routers.sessions import questions_router, sessions_router
from interview_prep.services.llm_service import LLMClient, build_llm_client
from interview_prep.services.session_manager import SessionManager
from interview_prep.utils.logging import configure_logging
from interview_prep.utils.security import verify_api_key


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
	# Fail fast: a missing provider key stops startup
	if app.state.llm_client is None:
		app.state.llm_client = build_llm_client(app.state.settings)
	yield


async def handle_service_error(request: Request, exc: InterviewPrepError) -> JSONResponse:
	if exc.status_code >= 500:
		logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
	return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
	return JSONResponse(
		status_code=400,
		content={"message": "Invalid request", "errors": jsonable_errors(exc)},
	)


def jsonable_errors(exc: RequestValidationError) -> list:
	return [
		{"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
		for err in exc.errors()
	]


def create_app(
	settings: Optional[Settings] = None,
	llm_client: Optional[LLMClient] = None,
	session_manager: Optional[SessionManager] = None,
) -> FastAPI:
	settings = settings or default_settings
	configure_logging(settings.log_level)

	app = FastAPI(title="Interview Prep Backend", version="0.1.0", lifespan=lifespan)
	app.state.settings = settings
	app.state.llm_client = llm_client
	app.state.session_manager = session_manager or SessionManager(settings.data_dir)

	# CORS
	app.add_middleware(
		CORSMiddleware,
		allow_origins=settings.cors_allow_origins,
		# Browsers reject credentials on wildcard origins
		allow_credentials=settings.cors_allow_origins != ["*"],
		allow_methods=["*"],
		allow_headers=["*"],
		max_age=3600,
	)

	app.add_exception_handler(InterviewPrepError, handle_service_error)
	app.add_exception_handler(RequestValidationError, handle_request_validation)

	@app.get("/health")
	async def health() -> JSONResponse:
		client = app.state.llm_client
		return JSONResponse({
			"status": "ok",
			"version": app.version,
			"llm": {
				"provider": settings.llm_provider,
				"model": getattr(client, "model", settings.active_model),
				"enabled": client is not None,
			},
		})

	# Routers
	protected = [Depends(verify_api_key)]
	app.include_router(ai_router, prefix="/api/ai", tags=["ai"], dependencies=protected)
	app.include_router(sessions_router, prefix="/api/sessions", tags=["sessions"], dependencies=protected)
	app.include_router(questions_router, prefix="/api/questions", tags=["questions"], dependencies=protected)
	return app


def run() -> None:
	import uvicorn

	uvicorn.run("interview_prep.main:create_app", factory=True, host=default_settings.host, port=default_settings.port)
