"""Game REST API: start a game, read its state, guess a letter."""

import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import PlainTextResponse

from app.models import GameStateResponse, GuessResponse
from services.store import GameRegistry

router = APIRouter(tags=["games"])
logger = logging.getLogger(__name__)

GREETING = "Melting Snowman"


def get_registry(request: Request) -> GameRegistry:
    return request.app.state.registry


Registry = Annotated[GameRegistry, Depends(get_registry)]


@router.get("/", response_class=PlainTextResponse)
def greeting() -> str:
    return GREETING


@router.get(
    "/game/{game_id}",
    response_model=GameStateResponse,
    description="Returns current guessing status.",
    responses={
        200: {"description": "Success case. A game with the given ID was found"},
        404: {"description": "No game found with the given ID"},
    },
)
def get_game(game_id: int, registry: Registry) -> GameStateResponse:
    logger.info("[games] GET /game/%s called", game_id)
    snapshot = registry.get(game_id).describe()
    return GameStateResponse(
        word_to_guess=snapshot.word,
        number_of_guesses=snapshot.remaining_guesses,
    )


@router.post(
    "/game",
    response_model=int,
    description="Starts a new game.",
    responses={200: {"description": "A new game was started"}},
)
def create_game(registry: Registry) -> int:
    game_id = registry.create()
    logger.info("[games] POST /game -> 200 game_id=%s", game_id)
    return game_id


@router.post(
    "/game/{game_id}",
    response_model=GuessResponse,
    description="User tries to guess word with specified letter.",
    responses={
        200: {"description": "A running game with the given ID was found"},
        404: {"description": "No game with the given ID was found"},
    },
)
def guess_letter(
    game_id: int,
    letter: Annotated[str, Body(min_length=1, max_length=1, examples=["s"])],
    registry: Registry,
) -> GuessResponse:
    occurrences, snapshot = registry.get(game_id).guess(letter)
    logger.info(
        "[games] POST /game/%s letter=%r -> occurrences=%s remaining=%s",
        game_id,
        letter,
        occurrences,
        snapshot.remaining_guesses,
    )
    return GuessResponse(
        occurrences=occurrences,
        word_to_guess=snapshot.word,
        number_of_guesses=snapshot.remaining_guesses,
    )
