"""
Bilingual Text
==============
Korean/English strings used by the calculators and the user interface.

The active language is always passed explicitly; nothing in this module keeps
a "current language" of its own.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Dict


class Language(StrEnum):
    KO = "ko"
    EN = "en"


FALLBACK_LANGUAGE = Language.EN


@dataclass(frozen=True)
class LocalizedText:
    """One piece of text in every supported language."""
    en: str
    ko: str = ""

    def get(self, language: Language | str) -> str:
        """Return the text for `language`, falling back to English."""
        text = getattr(self, Language(language).value)
        return text or getattr(self, FALLBACK_LANGUAGE.value)

    @staticmethod
    def same(text: str) -> LocalizedText:
        """Text that does not change between languages (symbols, numbers)."""
        return LocalizedText(en=text, ko=text)


# ------------------------------------------------------------------------------
# UI string catalog
# ------------------------------------------------------------------------------
UI_STRINGS: Dict[str, LocalizedText] = {
    "app.title": LocalizedText(
        en="Dimensionless Number Calculator",
        ko="무차원수 계산기",
    ),
    "app.subtitle": LocalizedText(
        en="Fluid mechanics reference calculators",
        ko="유체역학 무차원수 참고 계산기",
    ),
    "toolbar.theme": LocalizedText(en="Toggle theme", ko="테마 전환"),
    "toolbar.language": LocalizedText(en="Language", ko="언어"),
    "dialog.calculate": LocalizedText(en="Calculate", ko="계산"),
    "dialog.close": LocalizedText(en="Close", ko="닫기"),
    "dialog.result": LocalizedText(en="Result", ko="결과"),
    "dialog.fill_all": LocalizedText(
        en="Please fill in all values.",
        ko="모든 값을 입력해 주세요.",
    ),
}

LANGUAGE_NAMES: Dict[Language, str] = {
    Language.KO: "한국어",
    Language.EN: "English",
}


def ui_text(key: str, language: Language | str) -> str:
    """Look up a UI string; raises KeyError for unknown keys."""
    return UI_STRINGS[key].get(language)
