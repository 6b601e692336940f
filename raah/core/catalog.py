"""
Catalog of supported Indic scripts and the lookup tables keyed by them.

All tables are read-only; unmapped identifiers fall back to a fixed default
instead of failing.
"""
from enum import Enum
from types import MappingProxyType
from typing import Dict, List


class ScriptIdentifier(str, Enum):
    DEVANAGARI = "devanagari"
    GURMUKHI = "gurmukhi"
    MALAYALAM = "malayalam"
    TELUGU = "telugu"
    TAMIL = "tamil"
    BENGALI = "bengali"
    GUJARATI = "gujarati"
    KANNADA = "kannada"
    ODIA = "odia"
    ASSAMESE = "assamese"


# Script names understood by the Aksharamukha service
REMOTE_SCRIPT_NAMES = MappingProxyType({
    "devanagari": "Devanagari",
    "gurmukhi": "Gurmukhi",
    "malayalam": "Malayalam",
    "telugu": "Telugu",
    "tamil": "Tamil",
    "bengali": "Bengali",
    "gujarati": "Gujarati",
    "kannada": "Kannada",
    "odia": "Oriya",
    "assamese": "Assamese",
})

SPEECH_LOCALES = MappingProxyType({
    "devanagari": "hi-IN",
    "gurmukhi": "pa-IN",
    "bengali": "bn-IN",
    "gujarati": "gu-IN",
    "kannada": "kn-IN",
    "malayalam": "ml-IN",
    "tamil": "ta-IN",
    "telugu": "te-IN",
    "odia": "or-IN",
    "assamese": "as-IN",  # not every browser ships a voice for it
})

DEFAULT_SPEECH_LOCALE = "hi-IN"

# sanscript scheme keys; the offline tables have no Assamese scheme
LOCAL_SCHEMES = MappingProxyType({
    "devanagari": "devanagari",
    "gurmukhi": "gurmukhi",
    "malayalam": "malayalam",
    "telugu": "telugu",
    "tamil": "tamil",
    "bengali": "bengali",
    "gujarati": "gujarati",
    "kannada": "kannada",
    "odia": "oriya",
})

# Tesseract traineddata names
OCR_LANGUAGES = MappingProxyType({
    "devanagari": "hin",
    "telugu": "tel",
    "tamil": "tam",
    "bengali": "ben",
    "gujarati": "guj",
    "kannada": "kan",
    "malayalam": "mal",
    "assamese": "asm",
    "odia": "ori",
    "gurmukhi": "pan",
})

LABELS = MappingProxyType({
    "devanagari": ("देवनागरी (Devanagari)", "नमस्ते"),
    "gurmukhi": ("ਗੁਰਮੁਖੀ (Gurmukhi)", "ਸਤ ਸ੍ਰੀ ਅਕਾਲ"),
    "malayalam": ("മലയാളം (Malayalam)", "നമസ്കാരം"),
    "telugu": ("తెలుగు (Telugu)", "నమస్కారం"),
    "tamil": ("தமிழ் (Tamil)", "வணக்கம்"),
    "bengali": ("বাংলা (Bengali)", "নমস্কার"),
    "gujarati": ("ગુજરાતી (Gujarati)", "નમસ્તે"),
    "kannada": ("ಕನ್ನಡ (Kannada)", "ನಮಸ್ಕಾರ"),
    "odia": ("ଓଡ଼ିଆ (Odia)", "ନମସ୍କାର"),
    "assamese": ("অসমীয়া (Assamese)", "নমস্কাৰ"),
})


def script_key(identifier) -> str:
    return identifier.value if isinstance(identifier, ScriptIdentifier) else identifier


def to_remote_script_name(identifier) -> str:
    key = script_key(identifier)
    return REMOTE_SCRIPT_NAMES.get(key, key)


def to_speech_locale(identifier) -> str:
    return SPEECH_LOCALES.get(script_key(identifier), DEFAULT_SPEECH_LOCALE)


def to_local_scheme(identifier) -> str:
    key = script_key(identifier)
    return LOCAL_SCHEMES.get(key, key)


def ocr_language_hint() -> str:
    """English plus every catalog script, in Tesseract's `a+b+c` form."""
    return "+".join(["eng"] + [OCR_LANGUAGES[s] for s in OCR_LANGUAGES])


def catalog_entries() -> List[Dict[str, object]]:
    entries = []
    for script in ScriptIdentifier:
        label, sample = LABELS[script.value]
        entries.append({
            "id": script.value,
            "label": label,
            "sample": sample,
            "remote_name": to_remote_script_name(script),
            "speech_locale": to_speech_locale(script),
            "local_supported": script.value in LOCAL_SCHEMES,
        })
    return entries
