"""FastAPI application entrypoint for brickgen service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, model_validator

from ..config import BrickgenConfig
from ..converter import Converter, GeneratedComponent
from ..logging import get_logger
from ..models import ParsedPage
from ..parsing.errors import NotFoundError, ParseError

_logger = get_logger("service")


class SourceRequest(BaseModel):
    url: Optional[str] = None
    html: Optional[str] = None

    @model_validator(mode="after")
    def _require_one_source(self) -> "SourceRequest":
        if bool(self.url) == bool(self.html):
            raise ValueError("provide exactly one of 'url' or 'html'")
        if self.url and not self.url.startswith(("http://", "https://")):
            raise ValueError("'url' must be an absolute http(s) URL")
        return self


class GenerateRequest(SourceRequest):
    element_id: Optional[str] = None


class WarningModel(BaseModel):
    source: str
    key: str
    raw: str
    reason: str


class ParseResponse(BaseModel):
    title: str
    elements: List[Dict[str, Any]]
    global_styles: Dict[str, str]
    warnings: List[WarningModel]


class ComponentSource(BaseModel):
    name: str
    identifier: str
    element_id: str
    source: str


class GenerateResponse(BaseModel):
    components: List[ComponentSource]


class HealthResponse(BaseModel):
    status: str


def _default_converter() -> Converter:
    return Converter()


def create_app(
    converter_factory: Callable[[], Converter] = _default_converter,
) -> FastAPI:
    """Create the FastAPI application exposing brickgen operations."""

    app = FastAPI(title="Brickgen Service", version="0.1.0")

    async def get_converter() -> Converter:
        # Fresh converter per request; runs share no state.
        return converter_factory()

    async def _load_page(converter: Converter, payload: SourceRequest) -> ParsedPage:
        if payload.url:
            return await converter.parse_async(payload.url)
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, lambda: converter.parse_html(payload.html or "", source="request body")
        )

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/parse", response_model=ParseResponse)
    async def parse_page(
        payload: SourceRequest,
        converter: Converter = Depends(get_converter),
    ) -> ParseResponse:
        page = await _load_page(converter, payload)
        return ParseResponse(
            title=page.title,
            elements=[element.to_dict() for element in page.elements],
            global_styles=page.global_styles,
            warnings=[WarningModel(**vars(warning)) for warning in page.warnings],
        )

    @app.post("/generate", response_model=GenerateResponse)
    async def generate_components(
        payload: GenerateRequest,
        converter: Converter = Depends(get_converter),
    ) -> GenerateResponse:
        page = await _load_page(converter, payload)

        def _run_convert() -> List[GeneratedComponent]:
            return converter.convert_page(page, payload.element_id)

        loop = asyncio.get_running_loop()
        results = await loop.run_in_executor(None, _run_convert)
        return GenerateResponse(
            components=[
                ComponentSource(
                    name=result.name,
                    identifier=result.identifier,
                    element_id=result.element_id,
                    source=result.source,
                )
                for result in results
            ]
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(_: Any, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ParseError)
    async def parse_error_handler(_: Any, exc: ParseError) -> JSONResponse:
        _logger.warning("Parse failed: %s", exc)
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.exception_handler(LookupError)
    async def lookup_error_handler(_: Any, exc: LookupError) -> JSONResponse:
        detail = exc.args[0] if exc.args else str(exc)
        return JSONResponse(status_code=404, content={"detail": detail})

    return app


def run_service(
    host: str = "127.0.0.1",
    port: int = 8000,
    config: BrickgenConfig | None = None,
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app(lambda: Converter(config))
    uvicorn.run(app, host=host, port=port)
