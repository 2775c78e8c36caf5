# graficahub/service_layer/ranking.py
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import replace
from typing import Iterable

from ..domain.errors import InvalidProposalRecord
from ..domain.ranking import RankingResult, rank_proposals
from ..domain.scoring import DEFAULT_WEIGHTS, ScoringWeights
from ..domain.types import Proposal

log = logging.getLogger(__name__)


def _log_result(order_id: str, result: RankingResult) -> None:
    for w in result.warnings:
        log.warning("pedido=%s proposal excluded from ranking: %s", order_id, w.describe())

    if result.error is not None:
        log.warning("pedido=%s ranking failed: %s (%s)", order_id, result.error.code, result.error)
        return

    ctx = result.context
    log.info(
        "pedido=%s ranked %d proposals (flagged=%d) recomendada=%s preco_medio=%.2f",
        order_id,
        len(result.scored),
        len(result.warnings),
        ctx.recomendada_id if ctx else None,
        ctx.preco_medio if ctx else 0.0,
    )


def rank_order(
    order_id: str,
    proposals: Iterable[Proposal],
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> RankingResult:
    """
    Ranks the proposals that belong to `order_id`; anything quoted against
    another order is ignored. An order with no proposals yields an
    EmptyProposalSet result, so callers should not open a comparison view.
    """
    own = [p for p in proposals if p.pedido_id == order_id]
    if not own:
        log.warning("pedido=%s has no proposals to compare", order_id)

    result = rank_proposals(own, weights=weights)
    _log_result(order_id, result)
    return result


def group_by_order(proposals: Iterable[Proposal]) -> dict[str, list[Proposal]]:
    groups: dict[str, list[Proposal]] = defaultdict(list)
    for p in proposals:
        groups[p.pedido_id].append(p)
    return dict(groups)


def rank_orders(
    proposals: Iterable[Proposal],
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> dict[str, RankingResult]:
    """
    Ranks a mixed list, one independent ranking per pedido_id.
    Orders keep the order of their first appearance.
    """
    out: dict[str, RankingResult] = {}
    for order_id, group in group_by_order(proposals).items():
        result = rank_proposals(group, weights=weights)
        _log_result(order_id, result)
        out[order_id] = result
    return out


def rank_submitted(
    proposals: Iterable[Proposal],
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> RankingResult:
    """
    Ranks a payload that should hold one order. The first proposal's
    pedido_id is the order; proposals quoted against any other order are
    returned as warnings and kept out of the group.
    """
    items = list(proposals)
    order_id = items[0].pedido_id if items else ""

    own: list[Proposal] = []
    foreign: list[InvalidProposalRecord] = []
    for p in items:
        if p.pedido_id == order_id:
            own.append(p)
            continue
        foreign.append(
            InvalidProposalRecord(
                proposal_id=p.id,
                proposal=p,
                reasons=(f"belongs to another order (pedidoId={p.pedido_id}, expected {order_id})",),
            )
        )

    result = rank_proposals(own, weights=weights)
    if foreign:
        result = replace(result, warnings=result.warnings + tuple(foreign))
    _log_result(order_id, result)
    return result
