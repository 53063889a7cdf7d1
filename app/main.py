from __future__ import annotations

from fastapi import FastAPI

from app.deps import configure_logging, get_settings


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)
    app = FastAPI(title=settings.api_title, version="0.1.0")

    @app.get("/healthz")
    def healthz() -> dict:
        return {"status": "ok"}

    from app.routes import temporal  # noqa: WPS433

    app.include_router(temporal.router)
    return app


app = create_app()
