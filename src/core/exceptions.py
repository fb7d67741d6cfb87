"""
Custom exceptions shared by all layers.

Everything derives from GameError, so the service (and whatever sits on top of it) can catch a single top-level type.
"""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while creating or playing a game."""


class ValidationError(GameError):
    """A record or message is not well-formed (ex. invalid participant address). Nothing gets stored."""


class InvalidRequestError(GameError):
    """Request model could not be interpreted."""


class RepositoryError(GameError):
    """Persistence layer could not deliver what was asked for."""


class GameNotFoundError(RepositoryError):
    """No stored game with the requested index."""


class InvariantError(GameError):
    """
    Process-wide state is not what it should be (ex. the next-game counter was never initialized).

    Not a rejection of a request: signals a setup or storage bug.
    """


class MalformedBoardError(InvariantError):
    """A serialized board / turn could not be decoded. Stored state is corrupted."""


class ConfigurationError(InvariantError):
    """The process was started with a setting that cannot be used (ex. an unknown win condition)."""


class OutOfTurnError(GameError):
    """The player (or the piece being moved) does not own the current turn."""


class GameFinishedError(OutOfTurnError):
    """The game already has a winner, so nobody holds the turn anymore."""


class IllegalMoveError(GameError):
    """Base class for moves rejected by the rules engine."""


class OutOfBoundsError(IllegalMoveError):
    pass


class NoPieceAtSourceError(IllegalMoveError):
    pass


class OccupiedDestinationError(IllegalMoveError):
    pass


class IllegalGeometryError(IllegalMoveError):
    """Not a diagonal step / jump the moving piece is allowed to make."""


class MissingCaptureTargetError(IllegalMoveError):
    """A jump was attempted over a square that does not hold an opposing piece."""


class CaptureRequiredError(IllegalMoveError):
    """Only raised when captures are mandatory: a plain step was attempted while a jump is available."""


class JumpContinuationError(IllegalMoveError):
    """A multi-jump is under way: only another jump by the piece that just captured is accepted."""
