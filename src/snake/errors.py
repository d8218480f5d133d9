# errors.py


class SnakeError(Exception):
    """Base class for simulation faults. Gameplay outcomes are events, not errors."""


class NotFound(SnakeError, KeyError):
    """An entity handle (or one of its components) does not exist."""

    def __init__(self, handle: int, kind=None):
        self.handle = handle
        self.kind = kind
        what = f"entity {handle}" if kind is None else f"{kind.__name__} on entity {handle}"
        super().__init__(f"{what} not found")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class InvariantViolation(SnakeError):
    """The simulation reached a state its stage ordering should make impossible."""
