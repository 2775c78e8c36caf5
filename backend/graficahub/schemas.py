from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .domain.errors import InvalidProposalRecord, RankingError
from .domain.privacy import anonymous_vendor_code
from .domain.ranking import RankingResult, ranked
from .domain.types import (
    DeliveryType,
    Level,
    PriceStatus,
    Proposal,
    ProposalContext,
    ProposalWithScore,
    ScoreComponents,
    Technology,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ProposalIn(_CamelModel):
    # numeric sanity is checked by the ranking engine, not here: bad records
    # must come back as warnings instead of failing the whole request
    id: str = Field(..., min_length=1)
    pedido_id: str = Field(..., alias="pedidoId")
    grafica_id: str = Field(..., alias="graficaId")
    grafica_nome_real: str | None = Field(default=None, alias="graficaNomeReal")

    preco_total: float = Field(..., alias="precoTotal")
    preco_por_m2: float | None = Field(default=None, alias="precoPorM2")
    delivery_type: DeliveryType = Field(..., alias="deliveryType")
    aceita_cupom: bool = Field(default=False, alias="aceitaCupom")

    nota_geral: float = Field(..., alias="notaGeral")
    nota_prazo: float | None = Field(default=None, alias="notaPrazo")
    nota_qualidade: float | None = Field(default=None, alias="notaQualidade")
    nota_atendimento: float | None = Field(default=None, alias="notaAtendimento")
    nivel: Level

    distancia_km: float = Field(..., alias="distanciaKm")
    tempo_medio_producao_horas: float = Field(..., alias="tempoMedioProducaoHoras")
    historico_na_categoria: float = Field(..., alias="historicoNaCategoria")
    tempo_resposta_minutos: float = Field(..., alias="tempoRespostaMinutos")
    tecnologia: Technology

    def to_domain(self) -> Proposal:
        return Proposal(
            id=self.id,
            pedido_id=self.pedido_id,
            grafica_id=self.grafica_id,
            grafica_nome_real=self.grafica_nome_real,
            preco_total=self.preco_total,
            preco_por_m2=self.preco_por_m2,
            delivery_type=self.delivery_type,
            aceita_cupom=self.aceita_cupom,
            nota_geral=self.nota_geral,
            nota_prazo=self.nota_prazo,
            nota_qualidade=self.nota_qualidade,
            nota_atendimento=self.nota_atendimento,
            nivel=self.nivel,
            distancia_km=self.distancia_km,
            tempo_medio_producao_horas=self.tempo_medio_producao_horas,
            historico_na_categoria=self.historico_na_categoria,
            tempo_resposta_minutos=self.tempo_resposta_minutos,
            tecnologia=self.tecnologia,
        )


class RankRequest(BaseModel):
    proposals: list[ProposalIn]


class ScoreComponentsOut(_CamelModel):
    preco: float
    avaliacao: float
    tempo_producao: float = Field(..., alias="tempoProducao")
    distancia: float
    tempo_resposta: float = Field(..., alias="tempoResposta")
    historico: float

    @classmethod
    def from_domain(cls, c: ScoreComponents) -> "ScoreComponentsOut":
        return cls(
            preco=c.preco,
            avaliacao=c.avaliacao,
            tempo_producao=c.tempo_producao,
            distancia=c.distancia,
            tempo_resposta=c.tempo_resposta,
            historico=c.historico,
        )


class BadgeOut(BaseModel):
    kind: str
    label: str


class ScoredProposalOut(_CamelModel):
    id: str
    pedido_id: str = Field(..., alias="pedidoId")
    grafica_id: str = Field(..., alias="graficaId")
    codigo_anonimo: str = Field(..., alias="codigoAnonimo")

    preco_total: float = Field(..., alias="precoTotal")
    preco_por_m2: float | None = Field(default=None, alias="precoPorM2")
    delivery_type: DeliveryType = Field(..., alias="deliveryType")
    aceita_cupom: bool = Field(..., alias="aceitaCupom")
    nota_geral: float = Field(..., alias="notaGeral")
    nivel: Level
    distancia_km: float = Field(..., alias="distanciaKm")
    tempo_medio_producao_horas: float = Field(..., alias="tempoMedioProducaoHoras")
    tempo_resposta_minutos: float = Field(..., alias="tempoRespostaMinutos")
    tecnologia: Technology

    score: float
    badges: list[BadgeOut]
    preco_status: PriceStatus = Field(..., alias="precoStatus")
    preco_percentual_vs_media: float = Field(..., alias="precoPercentualVsMedia")
    components: ScoreComponentsOut


class ProposalContextOut(_CamelModel):
    menor_distancia: float = Field(..., alias="menorDistancia")
    melhor_custo_beneficio_id: str = Field(..., alias="melhorCustoBeneficioId")
    melhor_avaliacao_id: str = Field(..., alias="melhorAvaliacaoId")
    mais_rapida_id: str = Field(..., alias="maisRapidaId")
    recomendada_id: str = Field(..., alias="recomendadaId")
    mais_proxima_id: str = Field(..., alias="maisProximaId")
    preco_medio: float = Field(..., alias="precoMedio")
    preco_medio_por_m2: float | None = Field(default=None, alias="precoMedioPorM2")


class RankingWarningOut(BaseModel):
    id: str
    reasons: list[str]


class RankingErrorOut(BaseModel):
    code: str
    message: str


class RankingResponse(BaseModel):
    ok: bool
    error: RankingErrorOut | None = None
    context: ProposalContextOut | None = None
    scored: list[ScoredProposalOut] = Field(default_factory=list)
    ranking: list[str] = Field(default_factory=list)
    warnings: list[RankingWarningOut] = Field(default_factory=list)


def _context_out(c: ProposalContext) -> ProposalContextOut:
    return ProposalContextOut(
        menor_distancia=c.menor_distancia,
        melhor_custo_beneficio_id=c.melhor_custo_beneficio_id,
        melhor_avaliacao_id=c.melhor_avaliacao_id,
        mais_rapida_id=c.mais_rapida_id,
        recomendada_id=c.recomendada_id,
        mais_proxima_id=c.mais_proxima_id,
        preco_medio=c.preco_medio,
        preco_medio_por_m2=c.preco_medio_por_m2,
    )


def _scored_out(s: ProposalWithScore, codigo: str) -> ScoredProposalOut:
    p = s.proposal
    return ScoredProposalOut(
        id=p.id,
        pedido_id=p.pedido_id,
        grafica_id=p.grafica_id,
        codigo_anonimo=codigo,
        preco_total=p.preco_total,
        preco_por_m2=p.preco_por_m2,
        delivery_type=p.delivery_type,
        aceita_cupom=p.aceita_cupom,
        nota_geral=p.nota_geral,
        nivel=p.nivel,
        distancia_km=p.distancia_km,
        tempo_medio_producao_horas=p.tempo_medio_producao_horas,
        tempo_resposta_minutos=p.tempo_resposta_minutos,
        tecnologia=p.tecnologia,
        score=s.score,
        # stable ordering for display
        badges=[BadgeOut(kind=b.value, label=b.label) for b in sorted(s.badges, key=lambda b: b.value)],
        preco_status=s.preco_status,
        preco_percentual_vs_media=s.preco_percentual_vs_media,
        components=ScoreComponentsOut.from_domain(s.components),
    )


def _warning_out(w: InvalidProposalRecord) -> RankingWarningOut:
    return RankingWarningOut(id=w.proposal_id, reasons=list(w.reasons))


def _error_out(e: RankingError) -> RankingErrorOut:
    return RankingErrorOut(code=e.code, message=str(e))


def ranking_response(result: RankingResult) -> RankingResponse:
    warnings = [_warning_out(w) for w in result.warnings]
    if result.error is not None or result.context is None:
        err = result.error or RankingError("ranking produced no context")
        return RankingResponse(ok=False, error=_error_out(err), warnings=warnings)

    order = [s.id for s in ranked(result)]
    codes = {pid: anonymous_vendor_code(i) for i, pid in enumerate(order)}

    return RankingResponse(
        ok=True,
        context=_context_out(result.context),
        scored=[_scored_out(s, codes[s.id]) for s in result.scored],
        ranking=order,
        warnings=warnings,
    )
