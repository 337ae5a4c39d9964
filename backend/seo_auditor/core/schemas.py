"""
Pydantic models shared by the analyzer, the AI path and the API routes.
Field names are snake_case in Python and camelCase on the wire.
"""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


SuggestionType = Literal["good", "warning", "bad"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PhraseMetric(_CamelModel):
    phrase: str
    count: int = Field(ge=1)
    density: float


class KeywordReport(_CamelModel):
    """Ranked 1, 2 and 3 word phrase tables."""

    single: List[PhraseMetric] = Field(default_factory=list)
    two_word: List[PhraseMetric] = Field(default_factory=list)
    three_word: List[PhraseMetric] = Field(default_factory=list)


class Headings(_CamelModel):
    h1: List[str] = Field(default_factory=list)
    h2: List[str] = Field(default_factory=list)
    h3: List[str] = Field(default_factory=list)
    h4: List[str] = Field(default_factory=list)
    h5: List[str] = Field(default_factory=list)
    h6: List[str] = Field(default_factory=list)


class MetaData(_CamelModel):
    title: str = ""
    description: str = ""
    title_length: int = 0
    title_status: SuggestionType = "bad"
    description_length: int = 0
    description_status: SuggestionType = "bad"
    headings: Headings = Field(default_factory=Headings)


class Suggestion(_CamelModel):
    type: SuggestionType
    message: str


class AnalysisResult(_CamelModel):
    """Deterministic on-page report built from a fetched page."""

    url: str
    timestamp: str
    load_time: int
    load_grade: str
    meta: MetaData
    density: KeywordReport
    score: int
    suggestions: List[Suggestion] = Field(default_factory=list)


# ── AI-delegated analysis: a different shape, never merged with the above ──

class AIHeadings(_CamelModel):
    h1: List[str] = Field(default_factory=list)
    h2: List[str] = Field(default_factory=list)
    h3: List[str] = Field(default_factory=list)


class AIMeta(_CamelModel):
    title: str = ""
    title_length: int = 0
    description: str = ""
    description_length: int = 0
    headings: AIHeadings = Field(default_factory=AIHeadings)


class AIKeyword(_CamelModel):
    phrase: str
    count: int = 0
    density: float = 0.0


class AIAnalysisResult(_CamelModel):
    score: int = Field(ge=0, le=100)
    meta: AIMeta = Field(default_factory=AIMeta)
    keywords: List[AIKeyword] = Field(default_factory=list)
    suggestions: List[Suggestion] = Field(default_factory=list)
    load_time: int = 0
    timestamp: str = ""
