# graficahub/domain/scoring.py
from __future__ import annotations

import math
from dataclasses import dataclass

from .types import GroupStats, MetricRange, Proposal, ScoreComponents

# Reference weights, in order of buyer priority. Product placeholder values:
# tune here, not inside the scoring functions.
WEIGHT_PRECO = 0.30
WEIGHT_AVALIACAO = 0.25
WEIGHT_TEMPO_PRODUCAO = 0.15
WEIGHT_DISTANCIA = 0.15
WEIGHT_TEMPO_RESPOSTA = 0.10
WEIGHT_HISTORICO = 0.05

NOTA_ESCALA = 5.0

# completed orders in the category after which track record stops adding
HISTORICO_SATURACAO = 10.0


@dataclass(frozen=True)
class ScoringWeights:
    preco: float = WEIGHT_PRECO
    avaliacao: float = WEIGHT_AVALIACAO
    tempo_producao: float = WEIGHT_TEMPO_PRODUCAO
    distancia: float = WEIGHT_DISTANCIA
    tempo_resposta: float = WEIGHT_TEMPO_RESPOSTA
    historico: float = WEIGHT_HISTORICO

    def __post_init__(self) -> None:
        ws = self.as_tuple()
        if any(w < 0 or not math.isfinite(w) for w in ws):
            raise ValueError(f"weights must be finite and non-negative: {ws}")
        if not math.isclose(math.fsum(ws), 1.0, abs_tol=1e-9):
            raise ValueError(f"weights must sum to 1.0, got {math.fsum(ws):.6f}")

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (
            self.preco,
            self.avaliacao,
            self.tempo_producao,
            self.distancia,
            self.tempo_resposta,
            self.historico,
        )


DEFAULT_WEIGHTS = ScoringWeights()


def normalize_lower_is_better(value: float, r: MetricRange) -> float:
    """
    Min-max normalization inside the group, flipped so 1.0 is the best
    (lowest) value. No spread means every proposal ties at 1.0.
    """
    if r.max == r.min:
        return 1.0
    x = 1.0 - (float(value) - r.min) / (r.max - r.min)
    return max(0.0, min(1.0, x))


def normalize_rating(nota: float) -> float:
    return max(0.0, min(1.0, float(nota) / NOTA_ESCALA))


def normalize_track_record(historico: float) -> float:
    return max(0.0, min(1.0, float(historico) / HISTORICO_SATURACAO))


def score_components(p: Proposal, stats: GroupStats) -> ScoreComponents:
    return ScoreComponents(
        preco=normalize_lower_is_better(p.preco_total, stats.preco),
        avaliacao=normalize_rating(p.nota_geral),
        tempo_producao=normalize_lower_is_better(p.tempo_medio_producao_horas, stats.tempo_producao),
        distancia=normalize_lower_is_better(p.distancia_km, stats.distancia),
        tempo_resposta=normalize_lower_is_better(p.tempo_resposta_minutos, stats.tempo_resposta),
        historico=normalize_track_record(p.historico_na_categoria),
    )


def composite(components: ScoreComponents, weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
    total = math.fsum(
        [
            components.preco * weights.preco,
            components.avaliacao * weights.avaliacao,
            components.tempo_producao * weights.tempo_producao,
            components.distancia * weights.distancia,
            components.tempo_resposta * weights.tempo_resposta,
            components.historico * weights.historico,
        ]
    )
    return max(0.0, min(1.0, total))


def score(p: Proposal, stats: GroupStats, weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
    """
    Composite score in [0, 1] for one proposal relative to its group.
    """
    return composite(score_components(p, stats), weights)
