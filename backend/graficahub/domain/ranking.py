# graficahub/domain/ranking.py
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable

from .badges import assign_badges, badges_for, tie_break_key
from .errors import AllProposalsInvalid, EmptyProposalSet, InvalidProposalRecord, RankingError
from .policies import partition_valid
from .pricing import classify
from .scoring import DEFAULT_WEIGHTS, ScoringWeights, composite, score_components
from .stats import aggregate
from .types import Badge, GroupStats, Proposal, ProposalContext, ProposalWithScore

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankingResult:
    """
    Outcome of one ranking call. Exactly one of (context, error) is set.
    `scored` keeps the input order of valid proposals; `warnings` lists the
    records that were excluded.
    """

    context: ProposalContext | None
    scored: tuple[ProposalWithScore, ...]
    warnings: tuple[InvalidProposalRecord, ...]
    error: RankingError | None = None
    stats: GroupStats | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def get(self, proposal_id: str) -> ProposalWithScore | None:
        for s in self.scored:
            if s.id == proposal_id:
                return s
        return None

    def winner(self, badge: Badge) -> ProposalWithScore | None:
        for s in self.scored:
            if badge in s.badges:
                return s
        return None


def _failed(error: RankingError, warnings: Iterable[InvalidProposalRecord]) -> RankingResult:
    return RankingResult(context=None, scored=(), warnings=tuple(warnings), error=error)


def rank_proposals(
    proposals: Iterable[Proposal],
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> RankingResult:
    """
    Scores, classifies and badges every valid proposal of one order.

    Never raises for bad data: an empty (or entirely invalid) set comes back
    as a result with `error` set, individual bad records as `warnings`.
    """
    items = list(proposals)
    if not items:
        return _failed(EmptyProposalSet(), ())

    valid, flagged = partition_valid(items)
    if not valid:
        return _failed(AllProposalsInvalid(rejected=len(flagged)), flagged)

    stats = aggregate(valid)
    degenerate = stats.degenerate_metrics()
    if degenerate:
        log.debug("degenerate group (n=%d): no spread on %s", stats.count, ", ".join(degenerate))

    provisional: list[ProposalWithScore] = []
    for p in valid:
        components = score_components(p, stats)
        status, pct = classify(p, stats.preco_medio)
        provisional.append(
            ProposalWithScore(
                proposal=p,
                score=composite(components, weights),
                preco_status=status,
                preco_percentual_vs_media=pct,
                components=components,
            )
        )

    winners = assign_badges(provisional)
    scored = tuple(replace(s, badges=badges_for(s.id, winners)) for s in provisional)

    context = ProposalContext(
        menor_distancia=winners.menor_distancia,
        melhor_custo_beneficio_id=winners.melhor_custo_beneficio_id,
        melhor_avaliacao_id=winners.melhor_avaliacao_id,
        mais_rapida_id=winners.mais_rapida_id,
        recomendada_id=winners.recomendada_id,
        mais_proxima_id=winners.mais_proxima_id,
        preco_medio=stats.preco_medio,
        preco_medio_por_m2=stats.preco_medio_por_m2,
    )
    return RankingResult(context=context, scored=scored, warnings=tuple(flagged), stats=stats)


def ranked(result: RankingResult) -> list[ProposalWithScore]:
    """
    Best-first view: descending score, then the badge tie-break.
    """
    return sorted(result.scored, key=lambda s: (-s.score, *tie_break_key(s)))
