from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings
from routes.games import router as games_router
from services.store import GameNotFoundError, GameRegistry


async def _game_not_found(_request: Request, _exc: GameNotFoundError) -> Response:
    return Response(status_code=404)


def create_app(settings: Settings | None = None, registry: GameRegistry | None = None) -> FastAPI:
    """Build the API. Each app owns its registry unless one is passed in."""
    settings = settings or Settings.from_env()
    app = FastAPI(title="Melting Snowman API", version="v1")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.settings = settings
    if registry is None:
        registry = GameRegistry(word=settings.word, max_guesses=settings.max_guesses)
    app.state.registry = registry
    app.add_exception_handler(GameNotFoundError, _game_not_found)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(games_router)
    return app


app = create_app()
