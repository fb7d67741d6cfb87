import pytest

from src.api.models import CreateGameRequest, PlayMoveRequest, PlayMoveResponse
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Player

ALICE = "cosmos1jmjfq0tplp9tmx4v9uemw72y4d2wa5nr3xn9d3"
BOB = "cosmos1xyxs3skf3f4jfqeuv89yyaqvjc6lffavxqhc8g"


# -- Validation - CreateGameRequest --
def test_valid_create_request() -> None:
    request = CreateGameRequest(creator=ALICE, red=BOB, black=BOB)
    assert request.creator == ALICE


def test_addresses_not_checked_by_request() -> None:
    """Addresses get checked by the service with its configured address rule"""
    request = CreateGameRequest(creator="alice", red="bob", black="carol")
    assert (request.creator, request.red, request.black) == ("alice", "bob", "carol")


# -- Validation - PlayMoveRequest --
def test_valid_move_request() -> None:
    request = PlayMoveRequest(creator=BOB, id_value="1", from_x=1, from_y=2, to_x=2, to_y=3)
    assert (request.from_x, request.from_y, request.to_x, request.to_y) == (1, 2, 2, 3)


def test_coordinates_are_not_bounded_by_request() -> None:
    """Out of bounds coordinates are a rules decision"""
    request = PlayMoveRequest(creator=BOB, id_value="1", from_x=-1, from_y=2, to_x=9, to_y=3)
    assert request.from_x == -1


@pytest.mark.parametrize("id_value", ["", "one", "-1", "1.5"])
def test_invalid_id_value(id_value: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = PlayMoveRequest(creator=BOB, id_value=id_value, from_x=1, from_y=2, to_x=2, to_y=3)


def test_move_creator_not_checked_by_request() -> None:
    """Whoever is not a participant of the game gets refused when the move is played"""
    request = PlayMoveRequest(creator="dave", id_value="1", from_x=1, from_y=2, to_x=2, to_y=3)
    assert request.creator == "dave"


# -- Responses --
def test_play_move_response_winner() -> None:
    response = PlayMoveResponse(id_value="1", captured_x=-1, captured_y=-1, winner="NO_PLAYER")
    assert response.winner == Player.NO_PLAYER
