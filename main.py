from fastapi import FastAPI, Request
from contextlib import asynccontextmanager
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.context import ContextError, ContextStore
from app.core.db.base import init_models
from app.core.logging import get_logger, setup_logging
from app.apis.ingest.main import router as ingest_router
from app.apis.flashcards.main import router as flashcards_router
from app.apis.quiz.main import router as quiz_router
from app.apis.search.main import router as search_router
from app.apis.tutor.main import router as tutor_router
from app.apis.study_tools.main import router as study_tools_router
from app.modules.generation import (
    BackendError,
    GenerationClient,
    MalformedResponseError,
)
from app.modules.quiz.attempts import AttemptLog

import uvicorn
from fastapi.middleware.cors import CORSMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_models()
    yield


def create_app(
    *,
    generation_client: GenerationClient | None = None,
    context_store: ContextStore | None = None,
) -> FastAPI:
    app = FastAPI(
        title=settings.app.name, version=settings.app.version, lifespan=lifespan
    )

    app.state.generation_client = generation_client or GenerationClient()
    app.state.context_store = context_store or ContextStore()
    app.state.attempt_log = AttemptLog()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.app.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ContextError)
    async def context_error_handler(request: Request, exc: ContextError):
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(BackendError)
    async def backend_error_handler(request: Request, exc: BackendError):
        return JSONResponse(status_code=502, content={"detail": exc.message})

    @app.exception_handler(MalformedResponseError)
    async def malformed_error_handler(request: Request, exc: MalformedResponseError):
        # raw_text stays in the logs
        return JSONResponse(status_code=502, content={"detail": exc.message})

    app.include_router(ingest_router)
    app.include_router(flashcards_router)
    app.include_router(quiz_router)
    app.include_router(search_router)
    app.include_router(tutor_router)
    app.include_router(study_tools_router)

    @app.get("/")
    async def root():
        return {
            "status": "ok",
            "app": settings.app.name,
            "version": settings.app.version,
        }

    return app


app = create_app()


if __name__ == "__main__":
    setup_logging()
    try:
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=settings.app.port,
            reload=not settings.app.is_production,
        )
    except Exception as e:
        logger.error(f"An error occurred when starting the server: {e}.")
