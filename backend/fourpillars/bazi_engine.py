"""Pure Python Four Pillars (BaZi) calculations. No external dependencies.

Calendar input → pillar indices → enriched pillar records → element profile
and pillar interactions. Every function here is deterministic and stateless;
the only shared data are the read-only tables in :mod:`bazi_constants`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from itertools import combinations

from .bazi_constants import (
    BRANCH_INDEX_BY_KEY,
    DAY_REFERENCE_BRANCH_INDEX,
    DAY_REFERENCE_DATE,
    DAY_REFERENCE_STEM_INDEX,
    EARTHLY_BRANCHES,
    ELEMENT_ARCHETYPES,
    ELEMENT_CONTROLLING,
    ELEMENT_PRODUCING,
    HEAVENLY_STEMS,
    HOUR_STEM_BASE,
    HOUR_WINDOWS,
    MONTH_BRANCH_START_INDEX,
    MONTH_STEM_BASE,
    PILLAR_LIFE_AREAS,
    SOLAR_TERM_BOUNDARIES,
    SPRING_START,
    STEM_INDEX_BY_KEY,
    YEAR_CYCLE_EPOCH,
    Branch,
    Stem,
)


# ── Index helpers ────────────────────────────────────────────────────

def mod(n: int, m: int) -> int:
    """Non-negative remainder of n by a positive modulus m, also for negative n."""
    return n % m


def stem_index_for_key(key: str) -> int:
    try:
        return STEM_INDEX_BY_KEY[key]
    except KeyError:
        raise ValueError(f"Unknown heavenly stem: {key!r}") from None


def branch_index_for_key(key: str) -> int:
    try:
        return BRANCH_INDEX_BY_KEY[key]
    except KeyError:
        raise ValueError(f"Unknown earthly branch: {key!r}") from None


def hour_window(branch_index: int) -> tuple[int, int]:
    """Clock window (start_hour, end_hour) of the double-hour for a branch."""
    return HOUR_WINDOWS[mod(branch_index, 12)]


@dataclass(frozen=True)
class PillarIndex:
    stem_index: int
    branch_index: int

    @property
    def stem(self) -> Stem:
        return HEAVENLY_STEMS[self.stem_index]

    @property
    def branch(self) -> Branch:
        return EARTHLY_BRANCHES[self.branch_index]

    @property
    def key(self) -> str:
        return f"{self.stem.key}-{self.branch.key}"

    def to_dict(self) -> dict[str, str]:
        return {"stem": self.stem.key, "branch": self.branch.key}

    @classmethod
    def from_dict(cls, data: dict) -> PillarIndex:
        return cls(
            stem_index=stem_index_for_key(data["stem"]),
            branch_index=branch_index_for_key(data["branch"]),
        )


# ── Pillar calculators ───────────────────────────────────────────────

def is_before_spring_start(month: int, day: int) -> bool:
    return (month, day) < SPRING_START


def calculate_year_pillar(year: int, month: int, day: int) -> PillarIndex:
    """Year pillar; dates before Start of Spring (Feb 4) belong to the previous year."""
    adjusted_year = year - 1 if is_before_spring_start(month, day) else year
    return PillarIndex(
        stem_index=mod(adjusted_year - YEAR_CYCLE_EPOCH, 10),
        branch_index=mod(adjusted_year - YEAR_CYCLE_EPOCH, 12),
    )


def solar_month_index(month: int, day: int) -> int:
    """Solar month (0 = 寅 starting ~Feb 4 … 11 = 丑 starting ~Jan 5) containing month/day.

    The boundary table wraps across the Gregorian year end, so January is
    resolved directly: Jan 1-4 still belongs to solar month 10 (子), Jan 5+
    to solar month 11 (丑). Feb 1-3 falls through the scan into month 11.
    """
    if month == 1:
        return 11 if day >= 5 else 10

    for i in range(len(SOLAR_TERM_BOUNDARIES) - 2, -1, -1):
        if (month, day) >= SOLAR_TERM_BOUNDARIES[i]:
            return i
    return 11


def calculate_month_pillar(year_stem_index: int, month: int, day: int) -> PillarIndex:
    """Month pillar via the Five Tigers rule: year stem → stem of solar month 0."""
    solar_month = solar_month_index(month, day)
    base = MONTH_STEM_BASE[year_stem_index % 5]
    return PillarIndex(
        stem_index=mod(base + solar_month, 10),
        branch_index=mod(MONTH_BRANCH_START_INDEX + solar_month, 12),
    )


def days_since_reference(target: date) -> int:
    return (target - DAY_REFERENCE_DATE).days


def calculate_day_pillar(year: int, month: int, day: int) -> PillarIndex:
    days = days_since_reference(date(year, month, day))
    return PillarIndex(
        stem_index=mod(DAY_REFERENCE_STEM_INDEX + days, 10),
        branch_index=mod(DAY_REFERENCE_BRANCH_INDEX + days, 12),
    )


def hour_branch_index(hour: int) -> int:
    """Branch of the double-hour containing ``hour`` (0-23); 23:00 and 00:xx are both zi."""
    if hour == 23 or hour == 0:
        return 0
    return (hour + 1) // 2


def calculate_hour_pillar(day_stem_index: int, hour: int) -> PillarIndex:
    """Hour pillar via the Five Rats rule: day stem → stem of the zi hour."""
    branch_index = hour_branch_index(hour)
    base = HOUR_STEM_BASE[day_stem_index % 5]
    return PillarIndex(
        stem_index=mod(base + branch_index, 10),
        branch_index=branch_index,
    )


# ── Chart ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class BaziChart:
    year: PillarIndex
    month: PillarIndex
    day: PillarIndex
    hour: PillarIndex | None = None

    @property
    def day_master(self) -> Stem:
        return self.day.stem

    @property
    def element(self) -> str:
        return self.day.stem.element

    def to_dict(self) -> dict:
        data = {
            "year_pillar": self.year.to_dict(),
            "month_pillar": self.month.to_dict(),
            "day_pillar": self.day.to_dict(),
            "day_master": self.day_master.key,
            "element": self.element,
        }
        if self.hour is not None:
            data["hour_pillar"] = self.hour.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> BaziChart:
        """Rehydrate a chart stored with :meth:`to_dict`.

        ``day_master`` and ``element`` are derived, so stored values are ignored.
        """
        hour_data = data.get("hour_pillar")
        return cls(
            year=PillarIndex.from_dict(data["year_pillar"]),
            month=PillarIndex.from_dict(data["month_pillar"]),
            day=PillarIndex.from_dict(data["day_pillar"]),
            hour=PillarIndex.from_dict(hour_data) if hour_data else None,
        )


def _calendar_components(birth_date: date | datetime) -> tuple[int, int, int]:
    """Year, month, day of the input; aware datetimes are read in UTC."""
    if isinstance(birth_date, datetime) and birth_date.tzinfo is not None:
        birth_date = birth_date.astimezone(timezone.utc)
    return birth_date.year, birth_date.month, birth_date.day


def compute_chart(birth_date: date | datetime, birth_hour: int | None = None) -> BaziChart:
    """Compute the four pillars; the hour pillar only exists when ``birth_hour`` is given."""
    year, month, day = _calendar_components(birth_date)

    year_pillar = calculate_year_pillar(year, month, day)
    month_pillar = calculate_month_pillar(year_pillar.stem_index, month, day)
    day_pillar = calculate_day_pillar(year, month, day)
    hour_pillar = None
    if birth_hour is not None:
        hour_pillar = calculate_hour_pillar(day_pillar.stem_index, birth_hour)

    return BaziChart(year=year_pillar, month=month_pillar, day=day_pillar, hour=hour_pillar)


# ── Enrichment ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class EnrichedPillar:
    slot: str
    stem: str
    branch: str
    stem_chinese: str
    stem_pinyin: str
    stem_element: str
    stem_polarity: str
    branch_chinese: str
    branch_pinyin: str
    branch_animal: str
    branch_animal_thai: str
    branch_element: str
    life_area: str
    life_area_detail: str
    hour_window: tuple[int, int] | None = None

    def to_dict(self) -> dict:
        return {
            "slot": self.slot,
            "stem": self.stem,
            "branch": self.branch,
            "stem_chinese": self.stem_chinese,
            "stem_pinyin": self.stem_pinyin,
            "stem_element": self.stem_element,
            "stem_polarity": self.stem_polarity,
            "branch_chinese": self.branch_chinese,
            "branch_pinyin": self.branch_pinyin,
            "branch_animal": self.branch_animal,
            "branch_animal_thai": self.branch_animal_thai,
            "branch_element": self.branch_element,
            "life_area": self.life_area,
            "life_area_detail": self.life_area_detail,
            "hour_window": list(self.hour_window) if self.hour_window else None,
        }


def enrich_pillar(pillar: PillarIndex, slot: str) -> EnrichedPillar:
    stem = pillar.stem
    branch = pillar.branch
    area = PILLAR_LIFE_AREAS[slot]
    return EnrichedPillar(
        slot=slot,
        stem=stem.key,
        branch=branch.key,
        stem_chinese=stem.chinese,
        stem_pinyin=stem.pinyin,
        stem_element=stem.element,
        stem_polarity=stem.polarity,
        branch_chinese=branch.chinese,
        branch_pinyin=branch.pinyin,
        branch_animal=branch.animal,
        branch_animal_thai=branch.animal_thai,
        branch_element=branch.element,
        life_area=area["label"],
        life_area_detail=area["detail"],
        hour_window=hour_window(pillar.branch_index) if slot == "hour" else None,
    )


@dataclass(frozen=True)
class EnrichedPillars:
    year: EnrichedPillar
    month: EnrichedPillar
    day: EnrichedPillar
    hour: EnrichedPillar | None = None

    def present(self) -> list[tuple[str, EnrichedPillar]]:
        """Slots in year → month → day → hour order, skipping a missing hour."""
        entries = [("year", self.year), ("month", self.month), ("day", self.day)]
        if self.hour is not None:
            entries.append(("hour", self.hour))
        return entries

    def to_dict(self) -> dict:
        return {
            "year": self.year.to_dict(),
            "month": self.month.to_dict(),
            "day": self.day.to_dict(),
            "hour": self.hour.to_dict() if self.hour else None,
        }


def enrich_chart(chart: BaziChart) -> EnrichedPillars:
    return EnrichedPillars(
        year=enrich_pillar(chart.year, "year"),
        month=enrich_pillar(chart.month, "month"),
        day=enrich_pillar(chart.day, "day"),
        hour=enrich_pillar(chart.hour, "hour") if chart.hour is not None else None,
    )


def compute_enriched_chart(birth_date: date | datetime, birth_hour: int | None = None) -> EnrichedPillars:
    return enrich_chart(compute_chart(birth_date, birth_hour))


# ── Element profile ──────────────────────────────────────────────────

@dataclass
class ElementProfile:
    primary_element: str
    core_personality: str
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    compatible_elements: list[str] = field(default_factory=list)
    conflicting_element: str = ""

    def to_dict(self) -> dict:
        return {
            "primary_element": self.primary_element,
            "core_personality": self.core_personality,
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "compatible_elements": list(self.compatible_elements),
            "conflicting_element": self.conflicting_element,
        }


def compute_element_profile(day_pillar: EnrichedPillar) -> ElementProfile:
    """Archetype of the Day Master's element. Lists are fresh copies of the table."""
    element = day_pillar.stem_element
    archetype = ELEMENT_ARCHETYPES[element]
    return ElementProfile(
        primary_element=element,
        core_personality=archetype["core_personality"],
        strengths=list(archetype["strengths"]),
        weaknesses=list(archetype["weaknesses"]),
        compatible_elements=list(archetype["compatible_elements"]),
        conflicting_element=archetype["conflicting_element"],
    )


# ── Interactions ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class ElementRelation:
    type: str
    strength: str
    description: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "strength": self.strength, "description": self.description}


@dataclass(frozen=True)
class PillarInteraction:
    from_: str
    to: str
    type: str
    strength: str
    description: str

    def to_dict(self) -> dict[str, str]:
        return {
            "from": self.from_,
            "to": self.to,
            "type": self.type,
            "strength": self.strength,
            "description": self.description,
        }


def classify_elements(elem_a: str, elem_b: str) -> ElementRelation:
    """Relation of ``elem_a`` to ``elem_b`` on the producing and controlling cycles."""
    if elem_a == elem_b:
        return ElementRelation("same", "mild", f"{elem_a} reinforces {elem_b}")
    if ELEMENT_PRODUCING.get(elem_a) == elem_b:
        return ElementRelation("producing", "strong", f"{elem_a} produces {elem_b}")
    if ELEMENT_PRODUCING.get(elem_b) == elem_a:
        return ElementRelation("weakening", "mild", f"{elem_b} drains {elem_a}")
    if ELEMENT_CONTROLLING.get(elem_a) == elem_b:
        return ElementRelation("controlling", "strong", f"{elem_a} controls {elem_b}")
    if ELEMENT_CONTROLLING.get(elem_b) == elem_a:
        return ElementRelation("overacting", "mild", f"{elem_b} controls {elem_a}")
    return ElementRelation("neutral", "weak", "No direct cycle relationship")


def compute_interactions(pillars: EnrichedPillars) -> list[PillarInteraction]:
    """Stem-element relation for every pillar pair, neutral pairs dropped.

    Pairs follow year-month, year-day, year-hour, month-day, month-hour, day-hour.
    """
    interactions: list[PillarInteraction] = []
    for (slot_a, pillar_a), (slot_b, pillar_b) in combinations(pillars.present(), 2):
        elem_a = pillar_a.stem_element
        elem_b = pillar_b.stem_element
        relation = classify_elements(elem_a, elem_b)
        if relation.type == "neutral":
            continue
        interactions.append(
            PillarInteraction(
                from_=f"{slot_a}_{elem_a}",
                to=f"{slot_b}_{elem_b}",
                type=relation.type,
                strength=relation.strength,
                description=relation.description,
            )
        )
    return interactions


def compare_day_masters(chart_a: BaziChart, chart_b: BaziChart) -> ElementRelation:
    """Relation between two charts' primary elements, from chart A's side."""
    return classify_elements(chart_a.element, chart_b.element)
