"""Errors raised when form input breaks a lookup or index precondition."""


class UnknownFoodError(KeyError):
    """Raised when a food name is not in the reference table."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown food: {self.name!r}"


class FoodLogIndexError(IndexError):
    """Raised when a food log position is out of range."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Food log index {index} out of range (length {length})")
        self.index = index
        self.length = length
