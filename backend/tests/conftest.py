# tests/conftest.py
from dataclasses import replace

import pytest

from graficahub.domain.types import DeliveryType, Level, Proposal, Technology

_BASE = Proposal(
    id="P1",
    pedido_id="PED-1",
    grafica_id="GRA-1",
    preco_total=100.0,
    delivery_type=DeliveryType.retirada,
    aceita_cupom=False,
    nota_geral=4.0,
    nivel=Level.prata,
    distancia_km=5.0,
    tempo_medio_producao_horas=24.0,
    historico_na_categoria=5,
    tempo_resposta_minutos=30.0,
    tecnologia=Technology.uv,
)


@pytest.fixture
def make_proposal():
    """
    Builder: make_proposal(id="P2", preco_total=150.0). grafica_id follows id
    unless given.
    """

    def _make(**overrides) -> Proposal:
        if "id" in overrides and "grafica_id" not in overrides:
            overrides["grafica_id"] = f"GRA-{overrides['id']}"
        return replace(_BASE, **overrides)

    return _make


@pytest.fixture
def three_prices(make_proposal):
    return [
        make_proposal(id="P100", preco_total=100.0),
        make_proposal(id="P150", preco_total=150.0),
        make_proposal(id="P200", preco_total=200.0),
    ]


def proposal_json(**overrides) -> dict:
    body = {
        "id": "P1",
        "pedidoId": "PED-1",
        "graficaId": "GRA-1",
        "graficaNomeReal": "Gráfica Secreta LTDA",
        "precoTotal": 100.0,
        "deliveryType": "RETIRADA",
        "aceitaCupom": False,
        "notaGeral": 4.0,
        "nivel": "PRATA",
        "distanciaKm": 5.0,
        "tempoMedioProducaoHoras": 24.0,
        "historicoNaCategoria": 5,
        "tempoRespostaMinutos": 30.0,
        "tecnologia": "UV",
    }
    body.update(overrides)
    return body


@pytest.fixture
def proposal_payload():
    return proposal_json
