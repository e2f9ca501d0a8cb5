import logging

from fastapi import APIRouter, Request

from .. import schemas
from ..bazi_engine import (
    compare_day_masters,
    compute_chart,
    compute_element_profile,
    compute_interactions,
    enrich_chart,
)
from ..config import settings
from ..limiter import limiter

router = APIRouter(prefix="/v1/bazi", tags=["bazi"])
logger = logging.getLogger("fourpillars.bazi")


@router.post("/chart", response_model=schemas.BaziChartResponse)
@limiter.limit(settings.rate_limit_chart)
def bazi_chart(request: Request, payload: schemas.BaziChartRequest):
    """Four pillars for a birth date; hour pillar only when the birth hour is known."""
    birth_hour = payload.effective_hour()
    chart = compute_chart(payload.birth_date, birth_hour)
    logger.info(
        "BaZi chart | birth_date=%s | hour=%s | day_master=%s",
        payload.birth_date,
        birth_hour,
        chart.day_master.key,
    )
    return schemas.BaziChartResponse(**chart.to_dict())


@router.post("/analysis", response_model=schemas.BaziAnalysisResponse)
@limiter.limit(settings.rate_limit_chart)
def bazi_analysis(request: Request, payload: schemas.BaziChartRequest):
    """Chart plus enriched pillars, Day Master element profile and pillar interactions.

    Result shape: {"chart": {...}, "pillars": {"year", "month", "day", "hour"},
                   "element_profile": {...}, "interactions": [...]}
    """
    birth_hour = payload.effective_hour()
    chart = compute_chart(payload.birth_date, birth_hour)
    pillars = enrich_chart(chart)
    profile = compute_element_profile(pillars.day)
    interactions = compute_interactions(pillars)

    logger.info(
        "BaZi analysis | birth_date=%s | hour=%s | element=%s | interactions=%d",
        payload.birth_date,
        birth_hour,
        profile.primary_element,
        len(interactions),
    )
    return schemas.BaziAnalysisResponse(
        chart=schemas.BaziChartResponse(**chart.to_dict()),
        pillars=schemas.EnrichedPillarsPayload(**pillars.to_dict()),
        element_profile=schemas.ElementProfilePayload(**profile.to_dict()),
        interactions=[schemas.PillarInteractionPayload(**item.to_dict()) for item in interactions],
    )


@router.post("/compat", response_model=schemas.BaziCompatResponse)
@limiter.limit(settings.rate_limit_chart)
def bazi_compat(request: Request, payload: schemas.BaziCompatRequest):
    """Day Master element relation between two people, from person 1's side."""
    chart_1 = compute_chart(payload.person_1.birth_date, payload.person_1.effective_hour())
    chart_2 = compute_chart(payload.person_2.birth_date, payload.person_2.effective_hour())
    relation = compare_day_masters(chart_1, chart_2)

    logger.info(
        "BaZi compat | element1=%s | element2=%s | relation=%s",
        chart_1.element,
        chart_2.element,
        relation.type,
    )
    return schemas.BaziCompatResponse(
        element_1=chart_1.element,
        element_2=chart_2.element,
        relation=schemas.ElementRelationPayload(**relation.to_dict()),
    )
