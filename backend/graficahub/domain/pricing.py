# graficahub/domain/pricing.py
from __future__ import annotations

from .types import PriceStatus, Proposal

# inclusive band around the mean, in percent
FAIXA_MEDIA_PCT = 5.0


def percentual_vs_media(preco_total: float, preco_medio: float) -> float:
    if preco_medio == 0:
        return 0.0
    return (float(preco_total) - preco_medio) / preco_medio * 100.0


def price_status(percentual: float) -> PriceStatus:
    if percentual < -FAIXA_MEDIA_PCT:
        return PriceStatus.abaixo_media
    if percentual > FAIXA_MEDIA_PCT:
        return PriceStatus.acima_media
    return PriceStatus.na_media


def classify(p: Proposal, preco_medio: float) -> tuple[PriceStatus, float]:
    """
    Returns (preco_status, preco_percentual_vs_media) for one proposal.
    """
    pct = percentual_vs_media(p.preco_total, preco_medio)
    return price_status(pct), pct
