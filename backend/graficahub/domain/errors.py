# graficahub/domain/errors.py
from __future__ import annotations

from dataclasses import dataclass

from .types import Proposal


class RankingError(Exception):
    code = "ranking_error"


class EmptyProposalSet(RankingError):
    code = "empty_proposal_set"

    def __init__(self, message: str = "no proposals to compare") -> None:
        super().__init__(message)


class AllProposalsInvalid(EmptyProposalSet):
    code = "all_proposals_invalid"

    def __init__(self, rejected: int) -> None:
        super().__init__(f"no valid proposals to compare ({rejected} rejected)")
        self.rejected = rejected


@dataclass(frozen=True)
class InvalidProposalRecord:
    """
    Warning for a proposal kept out of statistics and badges.
    Returned to the caller alongside the ranking, never raised.
    """

    proposal_id: str
    proposal: Proposal
    reasons: tuple[str, ...]

    def describe(self) -> str:
        return f"{self.proposal_id}: " + "; ".join(self.reasons)
