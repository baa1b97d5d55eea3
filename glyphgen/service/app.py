"""FastAPI application entrypoint for glyphgen service mode."""

from __future__ import annotations

import asyncio
import threading
from pathlib import Path
from typing import Any, Callable, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from ..config import ConfigError
from ..manifest import load_manifest
from ..models import BuildResult
from ..orchestrator import BuildError, BuildOrchestrator


class HealthResponse(BaseModel):
    status: str


class IconModel(BaseModel):
    name: str
    identifier: str
    sizes: List[str]


class BuildResponse(BaseModel):
    status: str
    icons: int
    components: int
    skipped: List[str]
    output_dir: str


class IconsResponse(BaseModel):
    icons: List[IconModel]


def create_app(
    orchestrator_factory: Callable[[], BuildOrchestrator],
    *,
    static_dir: Optional[Path] = None,
) -> FastAPI:
    """Create the FastAPI application exposing glyphgen builds.

    When ``static_dir`` is given the build output is served under ``/dist`` so the
    gallery page can import the generated modules.
    """

    app = FastAPI(title="glyphgen service", version="1.0.0")
    build_lock = threading.Lock()
    if static_dir is not None:
        app.mount("/dist", StaticFiles(directory=str(static_dir), check_dir=False), name="dist")

    async def get_orchestrator() -> BuildOrchestrator:
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/build", response_model=BuildResponse)
    async def build(
        orchestrator: BuildOrchestrator = Depends(get_orchestrator),
    ) -> BuildResponse:
        def _run_build() -> BuildResult:
            # One build at a time owns the output tree.
            with build_lock:
                return orchestrator.run_full_build()

        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, _run_build)
        return BuildResponse(
            status="ok",
            icons=len(result.entries),
            components=result.component_count,
            skipped=result.skipped,
            output_dir=str(orchestrator.config.out_dir),
        )

    @app.get("/icons", response_model=IconsResponse)
    async def icons(
        orchestrator: BuildOrchestrator = Depends(get_orchestrator),
    ) -> IconsResponse:
        entries = load_manifest(orchestrator.config.out_dir)
        return IconsResponse(
            icons=[
                IconModel(name=entry.name, identifier=entry.identifier, sizes=entry.sizes)
                for entry in entries
            ]
        )

    @app.get("/gallery", response_class=HTMLResponse)
    async def gallery(
        orchestrator: BuildOrchestrator = Depends(get_orchestrator),
    ) -> HTMLResponse:
        config = orchestrator.config
        entries = load_manifest(config.out_dir)
        html = orchestrator.gallery_exporter.render(entries, import_path="/dist/index.js")
        return HTMLResponse(content=html)

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(BuildError)
    async def build_error_handler(_: Any, exc: BuildError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    return app


def run_service(
    orchestrator_factory: Callable[[], BuildOrchestrator],
    host: str = "127.0.0.1",
    port: int = 8000,
) -> None:  # pragma: no cover - integration path
    import uvicorn

    static_dir = orchestrator_factory().config.out_dir
    app = create_app(orchestrator_factory, static_dir=static_dir)
    uvicorn.run(app, host=host, port=port)
