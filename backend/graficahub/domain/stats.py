# graficahub/domain/stats.py
from __future__ import annotations

import math
from typing import Iterable

from .errors import EmptyProposalSet
from .types import GroupStats, MetricRange, Proposal


def _range(values: Iterable[float]) -> MetricRange:
    vs = [float(v) for v in values]
    return MetricRange(min=min(vs), max=max(vs))


def _mean(values: list[float]) -> float:
    # fsum keeps the mean independent of input order; dividing first keeps
    # the running sum inside float range for prices near the float max
    n = len(values)
    return math.fsum(v / n for v in values)


def aggregate(proposals: list[Proposal]) -> GroupStats:
    """
    Group-level statistics over one order's proposal set.

    preco_medio_por_m2 only averages proposals that define preco_por_m2 and
    is None when none do. Raises EmptyProposalSet for an empty list.
    """
    if not proposals:
        raise EmptyProposalSet()

    precos = [float(p.preco_total) for p in proposals]
    por_m2 = [float(p.preco_por_m2) for p in proposals if p.preco_por_m2 is not None]
    distancia = _range(p.distancia_km for p in proposals)

    return GroupStats(
        count=len(proposals),
        preco_medio=_mean(precos),
        preco_medio_por_m2=_mean(por_m2) if por_m2 else None,
        menor_distancia=distancia.min,
        preco=_range(precos),
        distancia=distancia,
        tempo_producao=_range(p.tempo_medio_producao_horas for p in proposals),
        tempo_resposta=_range(p.tempo_resposta_minutos for p in proposals),
        historico=_range(p.historico_na_categoria for p in proposals),
    )
