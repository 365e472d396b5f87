"""
Applicant model.

The applicant is built once from what the user typed and consumed by
every allocation strategy.
"""

from dataclasses import dataclass

from ..errors import InputError


@dataclass(frozen=True)
class Applicant:
    """
    A single college application.

    Attributes:
        name: Free-text applicant name (spaces allowed)
        rank: Applicant rank used as the lookup key
    """
    name: str
    rank: int

    @classmethod
    def from_input(cls, name: str, raw_rank: str) -> "Applicant":
        """
        Build an applicant from raw prompt text.

        Raises:
            InputError: If `raw_rank` is not an integer
        """
        try:
            rank = int(raw_rank.strip())
        except ValueError:
            raise InputError(
                "Error: Invalid input for rank. Please enter a valid integer."
            ) from None
        return cls(name=name.strip(), rank=rank)
