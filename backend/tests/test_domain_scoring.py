import pytest

from graficahub.domain import scoring
from graficahub.domain.scoring import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    normalize_lower_is_better,
    normalize_track_record,
    score,
    score_components,
)
from graficahub.domain.stats import aggregate
from graficahub.domain.types import MetricRange


def test_default_weights_sum_to_one_in_priority_order():
    ws = DEFAULT_WEIGHTS.as_tuple()
    assert sum(ws) == pytest.approx(1.0)
    assert DEFAULT_WEIGHTS.preco == scoring.WEIGHT_PRECO == 0.30
    assert DEFAULT_WEIGHTS.avaliacao == 0.25
    assert DEFAULT_WEIGHTS.historico == 0.05


def test_weights_must_sum_to_one():
    with pytest.raises(ValueError):
        ScoringWeights(preco=0.5)


def test_weights_must_be_non_negative():
    with pytest.raises(ValueError):
        ScoringWeights(preco=0.55, historico=-0.2)


def test_lower_is_better_normalization():
    r = MetricRange(min=100.0, max=200.0)
    assert normalize_lower_is_better(100.0, r) == 1.0
    assert normalize_lower_is_better(200.0, r) == 0.0
    assert normalize_lower_is_better(150.0, r) == pytest.approx(0.5)


def test_no_spread_normalizes_to_one():
    assert normalize_lower_is_better(42.0, MetricRange(min=42.0, max=42.0)) == 1.0


def test_track_record_saturates():
    assert normalize_track_record(0) == 0.0
    assert normalize_track_record(5) == pytest.approx(0.5)
    assert normalize_track_record(10) == 1.0
    assert normalize_track_record(250) == 1.0


def test_single_proposal_gets_maximum_composite(make_proposal):
    p = make_proposal(nota_geral=4.0, historico_na_categoria=5)
    stats = aggregate([p])
    c = score_components(p, stats)
    assert (c.preco, c.distancia, c.tempo_producao, c.tempo_resposta) == (1.0, 1.0, 1.0, 1.0)
    assert c.avaliacao == pytest.approx(0.8)
    assert c.historico == pytest.approx(0.5)
    # 0.30 + 0.25*0.8 + 0.15 + 0.15 + 0.10 + 0.05*0.5
    assert score(p, stats) == pytest.approx(0.925)


def test_cheaper_closer_faster_scores_higher(make_proposal):
    good = make_proposal(id="good", preco_total=100.0, distancia_km=1.0, tempo_medio_producao_horas=12)
    bad = make_proposal(id="bad", preco_total=300.0, distancia_km=20.0, tempo_medio_producao_horas=72)
    stats = aggregate([good, bad])
    assert score(good, stats) > score(bad, stats)
    assert 0.0 <= score(bad, stats) <= score(good, stats) <= 1.0


def test_rating_is_absolute_not_group_relative(make_proposal):
    a = make_proposal(id="A", nota_geral=3.0)
    b = make_proposal(id="B", nota_geral=3.5)
    stats = aggregate([a, b])
    assert score_components(a, stats).avaliacao == pytest.approx(0.6)
    assert score_components(b, stats).avaliacao == pytest.approx(0.7)


def test_custom_weights_change_the_composite(make_proposal):
    p = make_proposal(nota_geral=5.0, historico_na_categoria=0)
    stats = aggregate([p])
    only_history = ScoringWeights(preco=0, avaliacao=0, tempo_producao=0, distancia=0, tempo_resposta=0, historico=1.0)
    assert score(p, stats, only_history) == 0.0
