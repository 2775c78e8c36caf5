# graficahub/service_layer/demo_seed.py
from __future__ import annotations

from ..domain.types import DeliveryType, Level, Proposal, Technology

DEMO_PEDIDO_ID = "PED-DEMO-001"


def demo_proposals(pedido_id: str = DEMO_PEDIDO_ID) -> list[Proposal]:
    """
    Deterministic quotes for one banner order, handy for smoke runs.
    """
    return [
        Proposal(
            id="PROP-001",
            pedido_id=pedido_id,
            grafica_id="GRA-PRINT-001",
            grafica_nome_real="Gráfica Print Solutions LTDA",
            preco_total=180.0,
            preco_por_m2=45.0,
            delivery_type=DeliveryType.entrega_gratis,
            aceita_cupom=True,
            nota_geral=4.8,
            nota_prazo=4.7,
            nota_qualidade=4.9,
            nota_atendimento=4.8,
            nivel=Level.ouro,
            distancia_km=3.2,
            tempo_medio_producao_horas=24,
            historico_na_categoria=32,
            tempo_resposta_minutos=15,
            tecnologia=Technology.eco_solvente,
        ),
        Proposal(
            id="PROP-002",
            pedido_id=pedido_id,
            grafica_id="GRA-RAPIDA-002",
            grafica_nome_real="Rápida Impressões ME",
            preco_total=150.0,
            preco_por_m2=37.5,
            delivery_type=DeliveryType.retirada,
            aceita_cupom=False,
            nota_geral=4.1,
            nivel=Level.prata,
            distancia_km=8.5,
            tempo_medio_producao_horas=12,
            historico_na_categoria=6,
            tempo_resposta_minutos=40,
            tecnologia=Technology.solvente,
        ),
        Proposal(
            id="PROP-003",
            pedido_id=pedido_id,
            grafica_id="GRA-UVMAX-003",
            grafica_nome_real="UV Max Comunicação Visual",
            preco_total=230.0,
            delivery_type=DeliveryType.entrega_paga,
            aceita_cupom=True,
            nota_geral=4.5,
            nivel=Level.ouro,
            distancia_km=1.1,
            tempo_medio_producao_horas=48,
            historico_na_categoria=14,
            tempo_resposta_minutos=5,
            tecnologia=Technology.uv,
        ),
        Proposal(
            id="PROP-004",
            pedido_id=pedido_id,
            grafica_id="GRA-BAIRRO-004",
            preco_total=120.0,
            preco_por_m2=30.0,
            delivery_type=DeliveryType.retirada,
            aceita_cupom=False,
            nota_geral=3.2,
            nivel=Level.bronze,
            distancia_km=15.7,
            tempo_medio_producao_horas=72,
            historico_na_categoria=1,
            tempo_resposta_minutos=180,
            tecnologia=Technology.eco_solvente,
        ),
    ]
