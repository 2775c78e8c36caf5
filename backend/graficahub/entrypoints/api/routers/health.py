# graficahub/entrypoints/api/routers/health.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from ..deps import require_api_key
from ....config import settings
from ....domain import scoring

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/debug/config", dependencies=[Depends(require_api_key)])
def debug_config() -> dict[str, Any]:
    return {
        "ENV": settings.ENV,
        "API_KEY_SET": bool(settings.API_KEY),
        "RANKING_MAX_PROPOSALS": settings.RANKING_MAX_PROPOSALS,
        "weights": {
            "preco": scoring.WEIGHT_PRECO,
            "avaliacao": scoring.WEIGHT_AVALIACAO,
            "tempo_producao": scoring.WEIGHT_TEMPO_PRODUCAO,
            "distancia": scoring.WEIGHT_DISTANCIA,
            "tempo_resposta": scoring.WEIGHT_TEMPO_RESPOSTA,
            "historico": scoring.WEIGHT_HISTORICO,
        },
    }
