# graficahub/domain/badges.py
from __future__ import annotations

import math
from typing import Callable

from .errors import EmptyProposalSet
from .types import Badge, BadgeWinners, ProposalWithScore


def tie_break_key(s: ProposalWithScore) -> tuple[float, str]:
    """
    Shared by every category: cheaper wins, then the smaller id.
    """
    return (float(s.proposal.preco_total), s.proposal.id)


def value_for_money(s: ProposalWithScore) -> float:
    # score delivered per currency unit; a free proposal is unbeatable
    preco = float(s.proposal.preco_total)
    if preco <= 0:
        return math.inf
    return s.score / preco


def _pick_max(scored: list[ProposalWithScore], metric: Callable[[ProposalWithScore], float]) -> str:
    best = min(scored, key=lambda s: (-metric(s), *tie_break_key(s)))
    return best.id


def _pick_min(scored: list[ProposalWithScore], metric: Callable[[ProposalWithScore], float]) -> str:
    best = min(scored, key=lambda s: (metric(s), *tie_break_key(s)))
    return best.id


def assign_badges(scored: list[ProposalWithScore]) -> BadgeWinners:
    """
    One winner per category over an already scored group.
    Input order does not influence the outcome.
    """
    if not scored:
        raise EmptyProposalSet()

    return BadgeWinners(
        recomendada_id=_pick_max(scored, lambda s: s.score),
        melhor_custo_beneficio_id=_pick_max(scored, value_for_money),
        melhor_avaliacao_id=_pick_max(scored, lambda s: float(s.proposal.nota_geral)),
        mais_rapida_id=_pick_min(scored, lambda s: float(s.proposal.tempo_medio_producao_horas)),
        mais_proxima_id=_pick_min(scored, lambda s: float(s.proposal.distancia_km)),
        menor_distancia=min(float(s.proposal.distancia_km) for s in scored),
    )


def badges_for(proposal_id: str, winners: BadgeWinners) -> frozenset[Badge]:
    return frozenset(badge for badge, winner in winners.by_badge().items() if winner == proposal_id)
