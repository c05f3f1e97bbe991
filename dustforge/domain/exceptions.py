"""Exceptions raised by DustForge domain services."""


class DustForgeError(RuntimeError):
    """Base class for domain exceptions."""


class InsufficientDust(DustForgeError):
    """Raised when a wallet cannot satisfy a craft."""

    def __init__(self, balance: int, needed: int) -> None:
        super().__init__(f"Insufficient dust: have {balance}, need {needed}")
        self.balance = balance
        self.needed = needed


class InvalidCollectionState(DustForgeError):
    """Raised when bucket counts do not match their expansion."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors
