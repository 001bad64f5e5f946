"""
src/data/models.py
──────────────────
Pydantic v2 models for languages, translation markers and page metadata.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from config.site import PRIMARY_LANG, SECONDARY_LANG


class Language(str, Enum):
    ZH = PRIMARY_LANG
    EN = SECONDARY_LANG


class MarkerMode(str, Enum):
    TEXT = "text"
    HTML = "html"
    ATTRIBUTE = "attribute"


class TranslationMarker(BaseModel):
    """A translation annotation read off one element."""

    model_config = ConfigDict(frozen=True)

    key: str
    mode: MarkerMode = MarkerMode.TEXT
    attribute: str | None = Field(default=None, min_length=1)
    namespace: str | None = None

    @model_validator(mode="after")
    def _attribute_matches_mode(self) -> "TranslationMarker":
        if self.mode is MarkerMode.ATTRIBUTE and self.attribute is None:
            raise ValueError("attribute markers need a target attribute")
        if self.mode is not MarkerMode.ATTRIBUTE and self.attribute is not None:
            raise ValueError(f"{self.mode.value} markers do not target an attribute")
        return self


class PageMeta(BaseModel):
    """The reserved ``meta`` entry of a page payload."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    description: str | None = None


class RenderedPage(BaseModel):
    """A translated page and the language it was rendered in."""

    html: str
    lang: Language
    page: str
