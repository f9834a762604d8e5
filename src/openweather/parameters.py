"""Optional unit and language settings shared by every endpoint."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class Unit(str, Enum):
    STANDARD = "standard"
    METRIC = "metric"
    IMPERIAL = "imperial"


class Language(str, Enum):
    AFRIKAANS = "af"
    ALBANIAN = "al"
    ARABIC = "ar"
    AZERBAIJANI = "az"
    BULGARIAN = "bg"
    CATALAN = "ca"
    CZECH = "cz"
    DANISH = "da"
    GERMAN = "de"
    GREEK = "el"
    ENGLISH = "en"
    BASQUE = "eu"
    PERSIAN = "fa"
    FINNISH = "fi"
    FRENCH = "fr"
    GALICIAN = "gl"
    HEBREW = "he"
    HINDI = "hi"
    CROATIAN = "hr"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    ITALIAN = "it"
    JAPANESE = "ja"
    KOREAN = "kr"
    LATVIAN = "la"
    LITHUANIAN = "lt"
    MACEDONIAN = "mk"
    NORWEGIAN = "no"
    DUTCH = "nl"
    POLISH = "pl"
    PORTUGUESE = "pt"
    PORTUGUESE_BRAZIL = "pt_br"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SWEDISH = "sv"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SPANISH = "es"
    SERBIAN = "sr"
    THAI = "th"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    VIETNAMESE = "vi"
    CHINESE_SIMPLIFIED = "zh_cn"
    CHINESE_TRADITIONAL = "zh_tw"
    ZULU = "zu"


@dataclass(frozen=True)
class Settings:
    """Unit system and language for a request.

    Attributes:
        unit: Unit system; None keeps the API default (standard/Kelvin).
        lang: Language of descriptions; None keeps the API default (English).
    """

    unit: Optional[Unit] = None
    lang: Optional[Language] = None

    def format(self) -> List[Tuple[str, str]]:
        params: List[Tuple[str, str]] = []
        if self.unit is not None:
            params.append(("units", Unit(self.unit).value))
        if self.lang is not None:
            params.append(("lang", Language(self.lang).value))
        return params


__all__ = ["Unit", "Language", "Settings"]
