# graficahub/domain/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class DeliveryType(str, Enum):
    retirada = "RETIRADA"
    entrega_paga = "ENTREGA_PAGA"
    entrega_gratis = "ENTREGA_GRATIS"


class Technology(str, Enum):
    eco_solvente = "ECO_SOLVENTE"
    solvente = "SOLVENTE"
    uv = "UV"
    dtf = "DTF"
    dtf_uv = "DTF_UV"
    sublimacao = "SUBLIMACAO"


class Level(str, Enum):
    # vendor reputation tier; never feeds the score
    bronze = "BRONZE"
    prata = "PRATA"
    ouro = "OURO"


class PriceStatus(str, Enum):
    abaixo_media = "ABAIXO_MEDIA"
    na_media = "NA_MEDIA"
    acima_media = "ACIMA_MEDIA"


class Badge(str, Enum):
    recomendada = "RECOMENDADA"
    melhor_custo_beneficio = "MELHOR_CUSTO_BENEFICIO"
    melhor_avaliacao = "MELHOR_AVALIACAO"
    mais_rapida = "MAIS_RAPIDA"
    mais_proxima = "MAIS_PROXIMA"

    @property
    def label(self) -> str:
        return _BADGE_LABELS[self]


_BADGE_LABELS: dict[Badge, str] = {
    Badge.recomendada: "Recomendada",
    Badge.melhor_custo_beneficio: "Melhor custo-benefício",
    Badge.melhor_avaliacao: "Melhor avaliação",
    Badge.mais_rapida: "Mais rápida",
    Badge.mais_proxima: "Mais próxima",
}


@dataclass(frozen=True)
class Proposal:
    id: str
    pedido_id: str
    grafica_id: str

    preco_total: float
    delivery_type: DeliveryType
    aceita_cupom: bool

    nota_geral: float
    nivel: Level

    distancia_km: float
    tempo_medio_producao_horas: float
    historico_na_categoria: float
    tempo_resposta_minutos: float
    tecnologia: Technology

    preco_por_m2: float | None = None
    nota_prazo: float | None = None
    nota_qualidade: float | None = None
    nota_atendimento: float | None = None
    # internal only: buyers see an anonymous code until they accept
    grafica_nome_real: str | None = None


@dataclass(frozen=True)
class MetricRange:
    min: float
    max: float

    @property
    def spread(self) -> float:
        return self.max - self.min


@dataclass(frozen=True)
class GroupStats:
    """
    Reference frame computed once per order. Ranges are what the scorer
    normalizes against; means and menor_distancia feed the context.
    """

    count: int
    preco_medio: float
    menor_distancia: float

    preco: MetricRange
    distancia: MetricRange
    tempo_producao: MetricRange
    tempo_resposta: MetricRange
    historico: MetricRange

    preco_medio_por_m2: float | None = None

    def degenerate_metrics(self) -> list[str]:
        ranges = {
            "preco_total": self.preco,
            "distancia_km": self.distancia,
            "tempo_medio_producao_horas": self.tempo_producao,
            "tempo_resposta_minutos": self.tempo_resposta,
            "historico_na_categoria": self.historico,
        }
        return [name for name, r in ranges.items() if r.spread == 0]


@dataclass(frozen=True)
class ScoreComponents:
    preco: float
    avaliacao: float
    tempo_producao: float
    distancia: float
    tempo_resposta: float
    historico: float


@dataclass(frozen=True)
class ProposalWithScore:
    proposal: Proposal
    score: float
    preco_status: PriceStatus
    preco_percentual_vs_media: float
    components: ScoreComponents
    badges: frozenset[Badge] = field(default_factory=frozenset)

    @property
    def id(self) -> str:
        return self.proposal.id


@dataclass(frozen=True)
class BadgeWinners:
    melhor_custo_beneficio_id: str
    melhor_avaliacao_id: str
    mais_rapida_id: str
    recomendada_id: str
    mais_proxima_id: str
    menor_distancia: float

    def by_badge(self) -> dict[Badge, str]:
        return {
            Badge.recomendada: self.recomendada_id,
            Badge.melhor_custo_beneficio: self.melhor_custo_beneficio_id,
            Badge.melhor_avaliacao: self.melhor_avaliacao_id,
            Badge.mais_rapida: self.mais_rapida_id,
            Badge.mais_proxima: self.mais_proxima_id,
        }


@dataclass(frozen=True)
class ProposalContext:
    menor_distancia: float
    melhor_custo_beneficio_id: str
    melhor_avaliacao_id: str
    mais_rapida_id: str
    recomendada_id: str
    mais_proxima_id: str
    preco_medio: float
    preco_medio_por_m2: float | None = None
