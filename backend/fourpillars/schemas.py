from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from .config import settings

ElementName = Literal["wood", "fire", "earth", "metal", "water"]
RelationType = Literal["same", "producing", "weakening", "controlling", "overacting", "neutral"]
RelationStrength = Literal["strong", "mild", "weak"]


class BaziChartRequest(BaseModel):
    birth_date: date
    birth_hour: int | None = Field(default=None, ge=0, le=23, strict=True)
    birth_time_unknown: bool = False

    @field_validator("birth_date")
    @classmethod
    def birth_date_in_range(cls, v: date) -> date:
        if v.year < settings.min_birth_year or v.year > settings.max_birth_year:
            raise ValueError(
                f"birth_date must be between {settings.min_birth_year} and {settings.max_birth_year}"
            )
        return v

    def effective_hour(self) -> int | None:
        if self.birth_time_unknown:
            return None
        return self.birth_hour


class PillarPayload(BaseModel):
    stem: str
    branch: str


class BaziChartResponse(BaseModel):
    year_pillar: PillarPayload
    month_pillar: PillarPayload
    day_pillar: PillarPayload
    hour_pillar: PillarPayload | None = None
    day_master: str
    element: ElementName


class EnrichedPillarPayload(BaseModel):
    slot: str
    stem: str
    branch: str
    stem_chinese: str
    stem_pinyin: str
    stem_element: ElementName
    stem_polarity: Literal["yin", "yang"]
    branch_chinese: str
    branch_pinyin: str
    branch_animal: str
    branch_animal_thai: str
    branch_element: ElementName
    life_area: str
    life_area_detail: str
    hour_window: list[int] | None = None


class EnrichedPillarsPayload(BaseModel):
    year: EnrichedPillarPayload
    month: EnrichedPillarPayload
    day: EnrichedPillarPayload
    hour: EnrichedPillarPayload | None = None


class ElementProfilePayload(BaseModel):
    primary_element: ElementName
    core_personality: str
    strengths: list[str]
    weaknesses: list[str]
    compatible_elements: list[ElementName]
    conflicting_element: ElementName


class PillarInteractionPayload(BaseModel):
    from_: str = Field(alias="from")
    to: str
    type: RelationType
    strength: RelationStrength
    description: str


class BaziAnalysisResponse(BaseModel):
    chart: BaziChartResponse
    pillars: EnrichedPillarsPayload
    element_profile: ElementProfilePayload
    interactions: list[PillarInteractionPayload]


class BaziCompatRequest(BaseModel):
    person_1: BaziChartRequest
    person_2: BaziChartRequest


class ElementRelationPayload(BaseModel):
    type: RelationType
    strength: RelationStrength
    description: str


class BaziCompatResponse(BaseModel):
    element_1: ElementName
    element_2: ElementName
    relation: ElementRelationPayload
