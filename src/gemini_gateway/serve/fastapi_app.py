"""FastAPI gateway in front of the Gemini content generation API.

Endpoints:
- GET /health
- POST /generate-text            { "prompt": "..." }
- POST /generate-from-image      multipart: image, prompt (optional)
- POST /generate-from-document   multipart: document
- POST /generate-from-audio      multipart: audio
"""
from __future__ import annotations
import logging

from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gemini_gateway.common.errors import GatewayError, GenerationError
from gemini_gateway.common.logging_setup import setup_logging
from gemini_gateway.common.schema import (
    ErrorOut,
    GenerateOut,
    GenerateTextIn,
    GenerationRequest,
    HealthOut,
)
from gemini_gateway.common.settings import Settings
from gemini_gateway.serve.generator import GeminiGenerator
from gemini_gateway.serve.uploads import staged_upload

LOGGER = logging.getLogger("gemini_gateway.app")

ERROR_RESPONSES = {400: {"model": ErrorOut}, 500: {"model": ErrorOut}}

def get_generator(request: Request) -> GeminiGenerator:
    return request.app.state.generator

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def _describe_validation_error(exc: RequestValidationError) -> str:
    """Flatten FastAPI's error list into one message, e.g. 'body: JSON decode error'."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid')}" if loc else str(err.get("msg", "invalid")))
    return "; ".join(parts) or "invalid request"

async def _generate_from_upload(
    upload: UploadFile | None,
    field: str,
    prompt: str,
    settings: Settings,
    generator: GeminiGenerator,
) -> GenerateOut:
    """Stage the upload, send it with ``prompt`` and remove it on every exit path."""
    async with staged_upload(upload, field, settings.upload_dir) as staged:
        attachment = await staged.read_attachment()
        text = await generator.generate(
            GenerationRequest(prompt_text=prompt, attachment=attachment)
        )
    return GenerateOut(output=text)

def create_app(
    settings: Settings | None = None, generator: GeminiGenerator | None = None
) -> FastAPI:
    """
    Build the gateway app.

    Args:
        settings: Gateway settings; loaded from the environment when omitted.
        generator: Shared generation client; built from ``settings`` when omitted.
    """
    settings = settings or Settings.from_env()
    app = FastAPI(title="Gemini Gateway")
    app.state.settings = settings
    app.state.generator = generator or GeminiGenerator(settings.api_key, settings.model_id)

    @app.on_event("startup")
    def _log_startup() -> None:
        if not settings.api_key:
            LOGGER.warning("GEMINI_API_KEY is not set; generation calls will fail")
        LOGGER.info("Gemini API Server is running at http://localhost:%s", settings.port)

    @app.exception_handler(GatewayError)
    async def _gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
        if isinstance(exc, GenerationError):
            LOGGER.error("Generation failed on %s: %s", request.url.path, exc.message)
        else:
            LOGGER.warning("Rejected %s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _describe_validation_error(exc)
        LOGGER.warning("Rejected %s: %s", request.url.path, message)
        return JSONResponse(status_code=400, content={"error": message})

    @app.get("/health", response_model=HealthOut)
    def health() -> HealthOut:
        return HealthOut(status="ok", model=settings.model_id)

    @app.post("/generate-text", response_model=GenerateOut, responses=ERROR_RESPONSES)
    async def generate_text(
        body: GenerateTextIn,
        generator: GeminiGenerator = Depends(get_generator),
    ) -> GenerateOut:
        text = await generator.generate(GenerationRequest(prompt_text=body.prompt))
        return GenerateOut(output=text)

    @app.post("/generate-from-image", response_model=GenerateOut, responses=ERROR_RESPONSES)
    async def generate_from_image(
        image: UploadFile | None = File(None),
        prompt: str | None = Form(None),
        settings: Settings = Depends(get_settings),
        generator: GeminiGenerator = Depends(get_generator),
    ) -> GenerateOut:
        return await _generate_from_upload(
            image, "image", prompt or settings.prompt_for("image"), settings, generator
        )

    @app.post("/generate-from-document", response_model=GenerateOut, responses=ERROR_RESPONSES)
    async def generate_from_document(
        document: UploadFile | None = File(None),
        settings: Settings = Depends(get_settings),
        generator: GeminiGenerator = Depends(get_generator),
    ) -> GenerateOut:
        return await _generate_from_upload(
            document, "document", settings.prompt_for("document"), settings, generator
        )

    @app.post("/generate-from-audio", response_model=GenerateOut, responses=ERROR_RESPONSES)
    async def generate_from_audio(
        audio: UploadFile | None = File(None),
        settings: Settings = Depends(get_settings),
        generator: GeminiGenerator = Depends(get_generator),
    ) -> GenerateOut:
        return await _generate_from_upload(
            audio, "audio", settings.prompt_for("audio"), settings, generator
        )

    return app

setup_logging()
app = create_app()
