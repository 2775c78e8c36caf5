# graficahub/entrypoints/api/routers/ranking.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..deps import require_api_key
from ....config import settings
from ....schemas import RankingResponse, RankRequest, ranking_response
from ....service_layer.ranking import rank_order, rank_submitted

router = APIRouter(tags=["ranking"], dependencies=[Depends(require_api_key)])


def _guard_size(body: RankRequest) -> None:
    if len(body.proposals) > settings.RANKING_MAX_PROPOSALS:
        raise HTTPException(
            status_code=413,
            detail=f"Too many proposals ({len(body.proposals)} > {settings.RANKING_MAX_PROPOSALS})",
        )


@router.post("/proposals/rank", response_model=RankingResponse)
def rank(body: RankRequest) -> RankingResponse:
    _guard_size(body)
    result = rank_submitted([p.to_domain() for p in body.proposals])
    return ranking_response(result)


@router.post("/orders/{pedido_id}/proposals/rank", response_model=RankingResponse)
def rank_for_order(pedido_id: str, body: RankRequest) -> RankingResponse:
    _guard_size(body)
    result = rank_order(pedido_id, [p.to_domain() for p in body.proposals])
    return ranking_response(result)
