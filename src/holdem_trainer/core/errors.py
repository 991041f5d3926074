"""Exceptions raised by the trainer."""


class InvalidInputError(ValueError):
    """
    Raised when a caller breaks an input contract.

    Wrong card counts, cards that appear twice, unknown positions and
    malformed hand codes all end up here. It subclasses ValueError so callers
    that already guard card parsing with ``except ValueError`` keep working.
    """
