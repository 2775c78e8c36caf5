import httpx
import pytest

from graficahub.config import settings
from graficahub.entrypoints.fastapi_app import create_app


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=create_app()), base_url="http://test")


@pytest.fixture(autouse=True)
def _no_api_key(monkeypatch):
    monkeypatch.setattr(settings, "API_KEY", None)


@pytest.mark.asyncio
async def test_health():
    async with _client() as client:
        r = await client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_rank_returns_context_badges_and_warnings(proposal_payload):
    body = {
        "proposals": [
            proposal_payload(id="P100", precoTotal=100.0, distanciaKm=2.0),
            proposal_payload(id="P150", precoTotal=150.0),
            proposal_payload(id="P200", precoTotal=200.0, tempoMedioProducaoHoras=6),
            proposal_payload(id="NEG", precoTotal=80.0, distanciaKm=-5.0),
        ]
    }
    async with _client() as client:
        r = await client.post("/proposals/rank", json=body)

    assert r.status_code == 200
    data = r.json()
    assert data["ok"] is True
    assert data["error"] is None

    ctx = data["context"]
    assert ctx["precoMedio"] == pytest.approx(150.0)
    assert ctx["menorDistancia"] == 2.0
    assert ctx["maisRapidaId"] == "P200"
    assert ctx["maisProximaId"] == "P100"

    assert [s["id"] for s in data["scored"]] == ["P100", "P150", "P200"]
    first = data["scored"][0]
    assert first["precoStatus"] == "ABAIXO_MEDIA"
    assert "graficaNomeReal" not in first
    assert first["codigoAnonimo"].startswith("Gráfica #")
    assert {"kind": "MAIS_PROXIMA", "label": "Mais próxima"} in first["badges"]

    assert data["ranking"][0] == ctx["recomendadaId"]
    assert data["warnings"] == [{"id": "NEG", "reasons": ["distancia_km is negative (-5.0)"]}]


@pytest.mark.asyncio
async def test_rank_empty_is_ok_false():
    async with _client() as client:
        r = await client.post("/proposals/rank", json={"proposals": []})
    assert r.status_code == 200
    data = r.json()
    assert data["ok"] is False
    assert data["error"]["code"] == "empty_proposal_set"
    assert data["scored"] == []


@pytest.mark.asyncio
async def test_rank_all_invalid_reports_warnings(proposal_payload):
    body = {"proposals": [proposal_payload(id="X", notaGeral=9.0)]}
    async with _client() as client:
        r = await client.post("/proposals/rank", json=body)
    data = r.json()
    assert data["ok"] is False
    assert data["error"]["code"] == "all_proposals_invalid"
    assert data["warnings"][0]["id"] == "X"


@pytest.mark.asyncio
async def test_rank_for_order_filters_by_pedido(proposal_payload):
    body = {
        "proposals": [
            proposal_payload(id="A", pedidoId="PED-7"),
            proposal_payload(id="B", pedidoId="PED-8"),
        ]
    }
    async with _client() as client:
        r = await client.post("/orders/PED-7/proposals/rank", json=body)
    data = r.json()
    assert [s["id"] for s in data["scored"]] == ["A"]


@pytest.mark.asyncio
async def test_unknown_enum_is_a_request_error(proposal_payload):
    body = {"proposals": [proposal_payload(tecnologia="LASER")]}
    async with _client() as client:
        r = await client.post("/proposals/rank", json=body)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_too_many_proposals(monkeypatch, proposal_payload):
    monkeypatch.setattr(settings, "RANKING_MAX_PROPOSALS", 1)
    body = {"proposals": [proposal_payload(id="A"), proposal_payload(id="B")]}
    async with _client() as client:
        r = await client.post("/proposals/rank", json=body)
    assert r.status_code == 413


@pytest.mark.asyncio
async def test_api_key_required_when_configured(monkeypatch, proposal_payload):
    monkeypatch.setattr(settings, "API_KEY", "s3cret")
    body = {"proposals": [proposal_payload()]}
    async with _client() as client:
        denied = await client.post("/proposals/rank", json=body)
        allowed = await client.post("/proposals/rank", json=body, headers={"X-API-Key": "s3cret"})
        health = await client.get("/health")
    assert denied.status_code == 401
    assert allowed.status_code == 200
    assert health.status_code == 200


@pytest.mark.asyncio
async def test_rank_mixed_orders_keeps_first_order(proposal_payload):
    body = {
        "proposals": [
            proposal_payload(id="A1", pedidoId="PED-A", precoTotal=100.0),
            proposal_payload(id="B1", pedidoId="PED-B", precoTotal=900.0),
            proposal_payload(id="A2", pedidoId="PED-A", precoTotal=300.0),
        ]
    }
    async with _client() as client:
        r = await client.post("/proposals/rank", json=body)
    data = r.json()
    assert data["ok"] is True
    assert data["context"]["precoMedio"] == pytest.approx(200.0)
    assert [s["id"] for s in data["scored"]] == ["A1", "A2"]
    assert [w["id"] for w in data["warnings"]] == ["B1"]


@pytest.mark.asyncio
async def test_score_components_use_camel_case(proposal_payload):
    async with _client() as client:
        r = await client.post("/proposals/rank", json={"proposals": [proposal_payload()]})
    components = r.json()["scored"][0]["components"]
    assert set(components) == {"preco", "avaliacao", "tempoProducao", "distancia", "tempoResposta", "historico"}


@pytest.mark.asyncio
async def test_missing_track_record_is_a_request_error(proposal_payload):
    payload = proposal_payload()
    del payload["historicoNaCategoria"]
    async with _client() as client:
        r = await client.post("/proposals/rank", json={"proposals": [payload]})
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_prices_near_float_max_are_ranked(proposal_payload):
    body = {
        "proposals": [
            proposal_payload(id="a", precoTotal=1e308),
            proposal_payload(id="b", precoTotal=1.5e308),
        ]
    }
    async with _client() as client:
        r = await client.post("/proposals/rank", json=body)
    assert r.status_code == 200
    assert r.json()["ok"] is True
