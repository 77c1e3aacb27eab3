# main.py
import json
import logging
from typing import Any, List, Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from config import Settings, configure_logging, load_settings
from formatter import run
from llm import GeminiGenerator
from quiz import QuizService, TextGenerator
from schemas import ErrorOut, QuizQuestion

logger = logging.getLogger(__name__)

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Max-Age": "3600",
}

GENERATE_RESPONSES = {
    200: {"model": List[QuizQuestion]},
    500: {"model": ErrorOut},
}


async def _read_json_body(request: Request) -> Any:
    raw = await request.body()
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except ValueError as e:
        # malformed body: carry on with defaults
        logger.warning("Error parsing JSON body: %s | Raw body was: %r", e, raw[:500])
        return {}


def create_app(settings: Optional[Settings] = None,
               generator: Optional[TextGenerator] = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)
    if generator is None:
        generator = GeminiGenerator.from_settings(settings)
    service = QuizService(settings, generator)

    app = FastAPI(title="QuizForge – AI Quiz Question Generator")
    app.state.settings = settings
    app.state.service = service

    # -------------------------------------------------------------------------
    # CORS (answered here, not by the hosting platform)
    # -------------------------------------------------------------------------
    @app.middleware("http")
    async def cors(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=PREFLIGHT_HEADERS)
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    # -------------------------------------------------------------------------
    # Health
    # -------------------------------------------------------------------------
    @app.get("/api/health")
    def health():
        return {"status": "ok"}

    # -------------------------------------------------------------------------
    # LLM smoke test (quick check that Gemini works)
    # -------------------------------------------------------------------------
    @app.get("/api/llm-test")
    def llm_test():
        if generator is None or not hasattr(generator, "ping"):
            return {"ok": False, "error": "API key not configured"}
        return generator.ping()

    # -------------------------------------------------------------------------
    # Generate quiz (normalize + prompt + LLM + validate)
    # -------------------------------------------------------------------------
    @app.api_route("/", methods=["GET", "POST"], responses=GENERATE_RESPONSES)
    @app.api_route("/api/generate", methods=["GET", "POST"], responses=GENERATE_RESPONSES)
    async def generate_quiz(request: Request):
        body = await _read_json_body(request) if request.method == "POST" else {}
        status, payload = await run_in_threadpool(
            run, service.handle, body, dict(request.query_params)
        )
        return JSONResponse(status_code=status, content=payload)

    return app


app = create_app()
