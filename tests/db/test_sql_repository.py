"""Unit tests for src/db/sql_repository.py"""

from sqlalchemy.orm import Session

from src.db.sql_repository import NextGame, SQLGameRepository, StoredGame

STARTING_BOARD = "*b*b*b*b|b*b*b*b*|*b*b*b*b|********|********|r*r*r*r*|*r*r*r*r|r*r*r*r*"


def make_game(index: str = "1", **overrides) -> StoredGame:
    fields = dict(
        index=index,
        creator="creator",
        red="player_red",
        black="player_black",
        board=STARTING_BOARD,
        turn="b",
    )
    fields.update(overrides)
    return StoredGame(**fields)


def test_set_new_game(db_session_repo: Session) -> None:
    """Conversion from a StoredGame to DBStoredGame for a new entry to the database."""
    model = make_game()
    repo = SQLGameRepository(db_session_repo)
    record_in_db = repo.set_game(model)
    assert isinstance(record_in_db, StoredGame)
    assert record_in_db == model


def test_get_game_by_index(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    expected_game = repo.set_game(make_game("3"))
    game_found = repo.get_game("3")
    assert isinstance(game_found, StoredGame)
    assert game_found == expected_game


def test_get_unknown_game(db_session_repo: Session) -> None:
    """Should return None if index does not match anything in database."""
    repo = SQLGameRepository(db_session_repo)
    assert repo.get_game("1") is None

    repo.set_game(make_game("1"))
    assert repo.get_game("2") is None


def test_overwrite_game(db_session_repo: Session) -> None:
    """Setting a game under an existing index updates the record instead of adding one."""
    repo = SQLGameRepository(db_session_repo)
    repo.set_game(make_game("1"))

    after = make_game(
        "1",
        board="*b*b*b*b|b*b*b*b*|***b*b*b|**b*****|********|r*r*r*r*|*r*r*r*r|r*r*r*r*",
        turn="r",
        move_count=1,
    )
    updated_game = repo.set_game(after)
    assert updated_game == after
    assert repo.get_game("1") == after
    assert len(repo.list_games()) == 1


def test_consecutive_game_updates(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    repo.set_game(make_game("1"))
    for move_count in range(1, 4):
        repo.set_game(make_game("1", move_count=move_count, winner="black"))
    stored = repo.get_game("1")
    assert stored is not None
    assert stored.move_count == 3
    assert stored.winner == "black"


def test_pending_multi_jump_is_stored(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    assert repo.set_game(make_game("1")).continue_x == -1

    repo.set_game(make_game("1", continue_x=2, continue_y=3))
    stored = repo.get_game("1")
    assert stored is not None
    assert (stored.continue_x, stored.continue_y) == (2, 3)


def test_list_games_in_numeric_order(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    for index in ["10", "2", "1"]:
        repo.set_game(make_game(index))
    assert [game.index for game in repo.list_games()] == ["1", "2", "10"]


def test_next_game_counter(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    assert repo.get_next_game() is None

    repo.set_next_game(NextGame(id_value=1))
    assert repo.get_next_game() == NextGame(id_value=1)

    repo.set_next_game(NextGame(id_value=2))
    assert repo.get_next_game() == NextGame(id_value=2)


def test_shared_database(db_session_shared: Session) -> None:
    """What one repository writes, another session on the same database reads."""
    writer = SQLGameRepository(db_session_shared)
    writer.set_game(make_game("5"))
    writer.set_next_game(NextGame(id_value=6))

    other_session = Session(bind=db_session_shared.get_bind())
    try:
        reader = SQLGameRepository(other_session)
        assert reader.get_game("5") == make_game("5")
        assert reader.get_next_game() == NextGame(id_value=6)
    finally:
        other_session.close()
