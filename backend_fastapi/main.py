import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.routes.tasks import router as tasks_router

load_dotenv()


def _env_list(name: str, default: str = "*") -> list[str]:
    """Lista separada por comas de una variable de entorno; vacíos fuera."""
    items = [item.strip() for item in os.getenv(name, default).split(",")]
    return [item for item in items if item] or [default]


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).strip().lower() in {"1", "true", "yes"}


def create_app() -> FastAPI:
    application = FastAPI(title="Task Tracker API", version="0.1.0")

    # El cliente web consume la API desde otro origen
    application.add_middleware(
        CORSMiddleware,
        allow_origins=_env_list("CORS_ORIGINS"),
        allow_credentials=_env_flag("CORS_ALLOW_CREDENTIALS", True),
        allow_methods=_env_list("CORS_ALLOW_METHODS"),
        allow_headers=_env_list("CORS_ALLOW_HEADERS"),
    )
    application.include_router(tasks_router)

    @application.get("/health", tags=["system"], summary="Health check")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return application


app = create_app()
