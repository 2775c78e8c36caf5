# graficahub/domain/policies.py
from __future__ import annotations

import math

from .errors import InvalidProposalRecord
from .types import Proposal

NOTA_MIN = 0.0
NOTA_MAX = 5.0

# fields that must be finite and >= 0
_NON_NEGATIVE_FIELDS = (
    "preco_total",
    "distancia_km",
    "tempo_medio_producao_horas",
    "tempo_resposta_minutos",
    "historico_na_categoria",
)

_OPTIONAL_NON_NEGATIVE_FIELDS = ("preco_por_m2",)

_OPTIONAL_RATING_FIELDS = ("nota_prazo", "nota_qualidade", "nota_atendimento")


def _is_number(v: object) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _as_finite(v: int | float) -> float | None:
    # ints beyond float range are as unusable as inf
    try:
        f = float(v)
    except OverflowError:
        return None
    return f if math.isfinite(f) else None


def _check_non_negative(name: str, v: object) -> str | None:
    if not _is_number(v):
        return f"{name} is not a number"
    f = _as_finite(v)
    if f is None:
        return f"{name} is not finite"
    if f < 0:
        return f"{name} is negative ({v})"
    return None


def _check_rating(name: str, v: object) -> str | None:
    if not _is_number(v):
        return f"{name} is not a number"
    f = _as_finite(v)
    if f is None:
        return f"{name} is not finite"
    if f < NOTA_MIN or f > NOTA_MAX:
        return f"{name} outside [{NOTA_MIN:g}, {NOTA_MAX:g}] ({v})"
    return None


def proposal_problems(p: Proposal) -> list[str]:
    """
    Returns every numeric sanity problem of a single record (empty list = valid).
    """
    problems: list[str] = []

    for name in _NON_NEGATIVE_FIELDS:
        msg = _check_non_negative(name, getattr(p, name))
        if msg:
            problems.append(msg)

    for name in _OPTIONAL_NON_NEGATIVE_FIELDS:
        v = getattr(p, name)
        if v is None:
            continue
        msg = _check_non_negative(name, v)
        if msg:
            problems.append(msg)

    msg = _check_rating("nota_geral", p.nota_geral)
    if msg:
        problems.append(msg)

    for name in _OPTIONAL_RATING_FIELDS:
        v = getattr(p, name)
        if v is None:
            continue
        msg = _check_rating(name, v)
        if msg:
            problems.append(msg)

    return problems


def partition_valid(
    proposals: list[Proposal],
) -> tuple[list[Proposal], list[InvalidProposalRecord]]:
    """
    Splits proposals into (valid, flagged), preserving input order on both sides.
    A repeated id is flagged on every occurrence after the first valid one.
    """
    valid: list[Proposal] = []
    flagged: list[InvalidProposalRecord] = []
    seen: set[str] = set()

    for p in proposals:
        problems = proposal_problems(p)
        if not problems and p.id in seen:
            problems = ["duplicate id"]

        if problems:
            flagged.append(InvalidProposalRecord(proposal_id=p.id, proposal=p, reasons=tuple(problems)))
            continue

        seen.add(p.id)
        valid.append(p)

    return valid, flagged
