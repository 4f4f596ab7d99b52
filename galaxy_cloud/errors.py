"""Exceptions raised by the galaxy generator."""

from typing import Iterable


class InvalidParameters(ValueError):
    """Raised when a parameter record cannot produce a galaxy.

    The ``errors`` attribute lists every violated constraint, so a host can
    show all of them at once instead of failing on the first.
    """

    def __init__(self, errors: Iterable[str]):
        self.errors = list(errors)
        super().__init__("Invalid galaxy parameters: " + "; ".join(self.errors))
