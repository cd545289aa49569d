"""Exceptions raised by the FreeCell engine.

Everything derived from :class:`GameError` is recoverable: the board has not
been touched and the caller may simply pick another move. The one exception
outside that family is :class:`CardConservationError`, which means the board
no longer holds exactly one of every card and must not be used further.
"""

from __future__ import annotations


class GameError(Exception):
    """Base class for rejected picks, placements and moves."""


class EmptyContainerError(GameError):
    pass


class EmptyColumnError(EmptyContainerError):
    def __init__(self, position: int):
        super().__init__(f"Tried to pick from empty column {position}")
        self.position = position


class EmptyReserveSlotError(EmptyContainerError):
    def __init__(self, position: int):
        super().__init__(f"Tried to pick from empty reserve slot {position}")
        self.position = position


class EmptyFoundationStackError(EmptyContainerError):
    def __init__(self, position: int):
        super().__init__(f"Tried to pick from empty foundation stack {position}")
        self.position = position


class ReserveSlotOccupied(GameError):
    def __init__(self, position: int):
        super().__init__(f"Reserve slot {position} is occupied")
        self.position = position


class IllegalPlacementError(GameError):
    pass


class InsufficientCardsError(GameError):
    def __init__(self, stack_size: int, available: int):
        super().__init__(f"Cannot pick a stack of {stack_size} from a column of {available}")
        self.stack_size = stack_size
        self.available = available


class InvalidStackError(GameError):
    pass


class InvalidLocationError(GameError):
    kind = "location"

    def __init__(self, position):
        super().__init__(f"No such {self.kind}: {position!r}")
        self.position = position


class NoSuchColumn(InvalidLocationError):
    kind = "column"


class NoSuchReserveSlot(InvalidLocationError):
    kind = "reserve slot"


class NoSuchFoundationStack(InvalidLocationError):
    kind = "foundation stack"


class SelfMoveError(GameError):
    pass


class StaleMoveError(GameError):
    pass


class MoveCapacityError(GameError):
    def __init__(self, stack_size: int, capacity: int):
        super().__init__(f"Cannot move {stack_size} cards at once, capacity is {capacity}")
        self.stack_size = stack_size
        self.capacity = capacity


class ColumnFullError(GameError):
    pass


class CardConservationError(RuntimeError):
    pass


class InvalidLayoutError(ValueError):
    pass
