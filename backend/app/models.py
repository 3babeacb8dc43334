from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GameStateResponse(_CamelModel):
    word_to_guess: str
    number_of_guesses: int


class GuessResponse(_CamelModel):
    occurrences: int
    word_to_guess: str
    number_of_guesses: int
