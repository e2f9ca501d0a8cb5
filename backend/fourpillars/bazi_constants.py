"""Fixed domain tables for the Four Pillars (BaZi) calculator."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Stem:
    key: str
    pinyin: str
    chinese: str
    element: str
    polarity: str


@dataclass(frozen=True)
class Branch:
    key: str
    pinyin: str
    chinese: str
    animal: str
    animal_thai: str
    element: str


ELEMENTS: tuple[str, ...] = ("wood", "fire", "earth", "metal", "water")


# ── Heavenly Stems (天干), index 0-9 ─────────────────────────────────

HEAVENLY_STEMS: tuple[Stem, ...] = (
    Stem("jia", "jiǎ", "甲", "wood", "yang"),
    Stem("yi", "yǐ", "乙", "wood", "yin"),
    Stem("bing", "bǐng", "丙", "fire", "yang"),
    Stem("ding", "dīng", "丁", "fire", "yin"),
    Stem("wu", "wù", "戊", "earth", "yang"),
    Stem("ji", "jǐ", "己", "earth", "yin"),
    Stem("geng", "gēng", "庚", "metal", "yang"),
    Stem("xin", "xīn", "辛", "metal", "yin"),
    Stem("ren", "rén", "壬", "water", "yang"),
    Stem("gui", "guǐ", "癸", "water", "yin"),
)


# ── Earthly Branches (地支), index 0-11 ──────────────────────────────

EARTHLY_BRANCHES: tuple[Branch, ...] = (
    Branch("zi", "zǐ", "子", "Rat", "หนู", "water"),
    Branch("chou", "chǒu", "丑", "Ox", "วัว", "earth"),
    Branch("yin", "yín", "寅", "Tiger", "เสือ", "wood"),
    Branch("mao", "mǎo", "卯", "Rabbit", "กระต่าย", "wood"),
    Branch("chen", "chén", "辰", "Dragon", "มังกร", "earth"),
    Branch("si", "sì", "巳", "Snake", "งู", "fire"),
    Branch("wu", "wǔ", "午", "Horse", "ม้า", "fire"),
    Branch("wei", "wèi", "未", "Goat", "แพะ", "earth"),
    Branch("shen", "shēn", "申", "Monkey", "ลิง", "metal"),
    Branch("you", "yǒu", "酉", "Rooster", "ไก่", "metal"),
    Branch("xu", "xū", "戌", "Dog", "สุนัข", "earth"),
    Branch("hai", "hài", "亥", "Pig", "หมู", "water"),
)

STEM_INDEX_BY_KEY: dict[str, int] = {s.key: i for i, s in enumerate(HEAVENLY_STEMS)}
BRANCH_INDEX_BY_KEY: dict[str, int] = {b.key: i for i, b in enumerate(EARTHLY_BRANCHES)}


# ── Five-element cycles ──────────────────────────────────────────────

# Producing (生): wood → fire → earth → metal → water → wood
ELEMENT_PRODUCING: dict[str, str] = {
    "wood": "fire",
    "fire": "earth",
    "earth": "metal",
    "metal": "water",
    "water": "wood",
}

# Controlling (克): wood → earth → water → fire → metal → wood
ELEMENT_CONTROLLING: dict[str, str] = {
    "wood": "earth",
    "earth": "water",
    "water": "fire",
    "fire": "metal",
    "metal": "wood",
}


# ── Calendar calibration ─────────────────────────────────────────────

# Start of Spring (立春), fixed at Feb 4 for the year pillar.
SPRING_START: tuple[int, int] = (2, 4)

# Year 4 CE is stem 0 / branch 0 of the cycle.
YEAR_CYCLE_EPOCH = 4

# Solar month 0 (寅 yin) sits at branch index 2.
MONTH_BRANCH_START_INDEX = 2

# Approximate (month, day) start of each solar month (节), solar month 0-11.
SOLAR_TERM_BOUNDARIES: tuple[tuple[int, int], ...] = (
    (2, 4),    # 0  寅 Start of Spring
    (3, 6),    # 1  卯 Insects Awaken
    (4, 5),    # 2  辰 Clear and Bright
    (5, 6),    # 3  巳 Start of Summer
    (6, 6),    # 4  午 Grain in Ear
    (7, 7),    # 5  未 Slight Heat
    (8, 7),    # 6  申 Start of Autumn
    (9, 8),    # 7  酉 White Dew
    (10, 8),   # 8  戌 Cold Dew
    (11, 7),   # 9  亥 Start of Winter
    (12, 7),   # 10 子 Heavy Snow
    (1, 5),    # 11 丑 Slight Cold
)

# Day pillar anchor: 1900-01-01 is taken as 庚子 (geng-zi).
DAY_REFERENCE_DATE = date(1900, 1, 1)
DAY_REFERENCE_STEM_INDEX = 6
DAY_REFERENCE_BRANCH_INDEX = 0


# ── Escape tables, indexed by stem_index % 5 ─────────────────────────

# Five Tigers (五虎遁月): year stem → stem of solar month 0.
# jia/ji → bing, yi/geng → wu, bing/xin → geng, ding/ren → ren, wu/gui → jia
MONTH_STEM_BASE: tuple[int, ...] = (2, 4, 6, 8, 0)

# Five Rats (五鼠遁時): day stem → stem of the zi hour.
# jia/ji → jia, yi/geng → bing, bing/xin → wu, ding/ren → geng, wu/gui → ren
HOUR_STEM_BASE: tuple[int, ...] = (0, 2, 4, 6, 8)


# Double-hour (時辰) clock windows per branch, as (start_hour, end_hour) with end exclusive.
HOUR_WINDOWS: tuple[tuple[int, int], ...] = (
    (23, 1),
    (1, 3),
    (3, 5),
    (5, 7),
    (7, 9),
    (9, 11),
    (11, 13),
    (13, 15),
    (15, 17),
    (17, 19),
    (19, 21),
    (21, 23),
)


# ── Display tables ───────────────────────────────────────────────────

PILLAR_SLOTS: tuple[str, ...] = ("year", "month", "day", "hour")

PILLAR_LIFE_AREAS: dict[str, dict[str, str]] = {
    "year": {
        "label": "บรรพบุรุษ & สังคม",
        "detail": "Ancestors, social image, early childhood (0-15)",
    },
    "month": {
        "label": "พ่อแม่ & การทำงาน",
        "detail": "Parents, career path, young adulthood (15-30)",
    },
    "day": {
        "label": "ตัวคุณ & คู่ครอง",
        "detail": "Self identity, spouse, middle age (30-45)",
    },
    "hour": {
        "label": "ลูกหลาน & อนาคต",
        "detail": "Children, late career, later life (45+)",
    },
}

ELEMENT_ARCHETYPES: dict[str, dict] = {
    "wood": {
        "core_personality": "มีความเมตตากรุณา ชอบเติบโตและพัฒนาตัวเอง มีวิสัยทัศน์กว้างไกล",
        "strengths": ("มีความเมตตา", "สร้างสรรค์", "ยืดหยุ่น", "มีวิสัยทัศน์"),
        "weaknesses": ("โอนเอนตามคนอื่น", "ตัดสินใจช้า", "ใจอ่อน"),
        "compatible_elements": ("water", "fire"),
        "conflicting_element": "metal",
    },
    "fire": {
        "core_personality": "มีพลังงานสูง กล้าหาญ มีเสน่ห์ดึงดูดใจ เป็นผู้นำโดยธรรมชาติ",
        "strengths": ("กล้าหาญ", "มีเสน่ห์", "มีพลังงานสูง", "เป็นผู้นำ"),
        "weaknesses": ("ใจร้อน", "หุนหันพลันแล่น", "เบื่อง่าย"),
        "compatible_elements": ("wood", "earth"),
        "conflicting_element": "water",
    },
    "earth": {
        "core_personality": "มั่นคง เชื่อถือได้ เป็นที่พึ่งพาของคนรอบข้าง มีความอดทนสูง",
        "strengths": ("อดทน", "ซื่อสัตย์", "มีระเบียบ", "เชื่อถือได้"),
        "weaknesses": ("ดื้อรั้น", "เครียดง่าย", "ยึดติดกับอดีต"),
        "compatible_elements": ("fire", "metal"),
        "conflicting_element": "wood",
    },
    "metal": {
        "core_personality": "มีความเด็ดขาด มีวินัยสูง มุ่งมั่นในเป้าหมาย ซื่อตรงและยุติธรรม",
        "strengths": ("เด็ดขาด", "มีวินัย", "ซื่อตรง", "มุ่งมั่น"),
        "weaknesses": ("เจ้าระเบียบเกินไป", "ขาดความยืดหยุ่น", "เข้มงวดกับตนเองและผู้อื่น"),
        "compatible_elements": ("earth", "water"),
        "conflicting_element": "fire",
    },
    "water": {
        "core_personality": "ฉลาดหลักแหลม มีปัญญาลึกซึ้ง ปรับตัวเก่ง มีสัญชาตญาณที่ดี",
        "strengths": ("ฉลาด", "ปรับตัวเก่ง", "มีสัญชาตญาณดี", "เข้าใจคนอื่น"),
        "weaknesses": ("อารมณ์อ่อนไหว", "ลังเลใจ", "วิตกกังวลง่าย"),
        "compatible_elements": ("metal", "wood"),
        "conflicting_element": "earth",
    },
}
