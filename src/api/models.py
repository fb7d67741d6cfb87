"""Requests and Response models"""

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Player

Address = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    creator: Address
    red: Address
    black: Address


class PlayMoveRequest(BaseModel):
    creator: Address
    id_value: str
    from_x: int
    from_y: int
    to_x: int
    to_y: int

    @field_validator("id_value")
    @classmethod
    def validate_id_value(cls, value: str) -> str:
        if not value.isdigit():
            raise InvalidRequestError(f"Cannot interpret id_value: {value!r} as a game index.")
        return value


class GetGameRequest(BaseModel):
    index: str


# --- RESPONSE MODELS ---
class CreateGameResponse(BaseModel):
    id_value: str


class PlayMoveResponse(BaseModel):
    id_value: str
    captured_x: int
    captured_y: int
    winner: Player


class StoredGameResponse(BaseModel):
    index: str
    creator: Address
    red: Address
    black: Address
    game: str
    turn: str
    move_count: int
    winner: Player


class NextGameResponse(BaseModel):
    id_value: int
