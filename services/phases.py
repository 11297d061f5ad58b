"""Phase display names and emojis, keyed by MoonPhase."""
from services.moon import MoonPhase

PHASE_NAMES: dict[MoonPhase, dict[str, str]] = {
    MoonPhase.NEW_MOON:        {"en": "New Moon",        "ja": "新月"},
    MoonPhase.WAXING_CRESCENT: {"en": "Waxing Crescent", "ja": "三日月"},
    MoonPhase.FIRST_QUARTER:   {"en": "First Quarter",   "ja": "上弦"},
    MoonPhase.WAXING_GIBBOUS:  {"en": "Waxing Gibbous",  "ja": "十三夜"},
    MoonPhase.FULL_MOON:       {"en": "Full Moon",       "ja": "満月"},
    MoonPhase.WANING_GIBBOUS:  {"en": "Waning Gibbous",  "ja": "十六夜"},
    MoonPhase.LAST_QUARTER:    {"en": "Last Quarter",    "ja": "下弦"},
    MoonPhase.WANING_CRESCENT: {"en": "Waning Crescent", "ja": "有明"},
}

PHASE_EMOJIS: dict[MoonPhase, str] = {
    MoonPhase.NEW_MOON:        "🌑",
    MoonPhase.WAXING_CRESCENT: "🌒",
    MoonPhase.FIRST_QUARTER:   "🌓",
    MoonPhase.WAXING_GIBBOUS:  "🌔",
    MoonPhase.FULL_MOON:       "🌕",
    MoonPhase.WANING_GIBBOUS:  "🌖",
    MoonPhase.LAST_QUARTER:    "🌗",
    MoonPhase.WANING_CRESCENT: "🌘",
}


def get_phase_name(phase: MoonPhase, lang: str = "en") -> str:
    names = PHASE_NAMES[phase]
    return names["ja"] if lang == "ja" else names["en"]


def get_phase_emoji(phase: MoonPhase) -> str:
    return PHASE_EMOJIS[phase]
