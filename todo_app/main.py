from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_app.config import get_settings
from todo_app.errors import register_exception_handlers
from todo_app.logging_config import configure_logging
from todo_app.routers import auth_router, comment_router, reaction_router, todo_router
from todo_app.schemas.common import ErrorOut

settings = get_settings()
configure_logging(settings.log_level)

ERROR_RESPONSES = {code: {"model": ErrorOut} for code in (400, 401, 403, 404, 409, 500)}


def create_app(title: str = "Todo API", *, include_auth: bool = True, include_todos: bool = True) -> FastAPI:
    app = FastAPI(title=title)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    if include_auth:
        app.include_router(auth_router.router, prefix="/api/auth", tags=["Auth"], responses=ERROR_RESPONSES)
    if include_todos:
        app.include_router(todo_router.router, prefix="/api/todos", tags=["Todos"], responses=ERROR_RESPONSES)
        app.include_router(comment_router.router, prefix="/api/todos", tags=["Comments"], responses=ERROR_RESPONSES)
        app.include_router(reaction_router.router, prefix="/api/todos", tags=["Reactions"], responses=ERROR_RESPONSES)

    # Root health
    @app.get("/")
    async def read_root():
        return {"status": "ok"}

    @app.get("/health")
    async def health():
        return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
