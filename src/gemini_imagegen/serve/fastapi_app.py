"""FastAPI front end for the Gemini image adapter.

Endpoints:
- GET /            static page
- GET /style.css   stylesheet
- POST /api/generate  { "prompt": "..." } -> { "image": "<base64>" }
"""
from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel, ValidationError
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from gemini_imagegen import __version__
from gemini_imagegen.common.assets import load_asset
from gemini_imagegen.common.config import Settings
from gemini_imagegen.common.logging_setup import setup_logging
from gemini_imagegen.core.adapter import ImageGenerator

LOGGER = logging.getLogger("imagegen.serve.app")
setup_logging()

class GenerateIn(BaseModel):
    prompt: str | None = None

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)

def create_app(settings: Settings) -> FastAPI:
    """Build the app around an explicit Settings instance."""
    app = FastAPI(
        title="Gemini Image Generator",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    @app.exception_handler(StarletteHTTPException)
    async def _not_found(request: Request, exc: StarletteHTTPException) -> Response:
        # Unknown paths and wrong methods both answer 404.
        if exc.status_code in (404, 405):
            return PlainTextResponse("Not Found", status_code=404)
        return await http_exception_handler(request, exc)

    @app.get("/", response_class=HTMLResponse)
    def index() -> HTMLResponse:
        return HTMLResponse(load_asset("index.html", settings.static_dir))

    @app.get("/style.css")
    def stylesheet() -> Response:
        return Response(load_asset("style.css", settings.static_dir), media_type="text/css")

    @app.post("/api/generate")
    async def generate(request: Request) -> JSONResponse:
        try:
            payload = await request.json()
            try:
                body = GenerateIn.model_validate(payload)
            except ValidationError:
                # Non-object bodies and non-string prompts count as no prompt.
                body = GenerateIn()
            if not body.prompt:
                return _error(400, "Prompt is required")
            if not settings.api_key:
                return _error(500, "API Key missing")

            generator = ImageGenerator(
                settings.api_key,
                model_id=settings.model_id,
                base_url=settings.base_url,
                timeout=settings.timeout,
            )
            outcome = await run_in_threadpool(generator.encode, body.prompt)
            if outcome.ok:
                return JSONResponse({"image": outcome.image})
            return _error(500, outcome.error or "No image generated")
        except Exception as e:
            LOGGER.error("Generation failed: %s", e)
            return _error(500, str(e))

    return app

app = create_app(Settings.from_env())
