# naughty_nice/schemas.py
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

Verdict = Literal["NICE", "NAUGHTY"]
Count = Union[int, str]                      # "195M" and "—" are valid display counts


def verdict_for(score: int) -> Verdict:
    return "NICE" if score >= 50 else "NAUGHTY"


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Example(WireModel):
    text: str
    keywords: List[str]


class SourceResult(WireModel):
    found: bool
    score: Optional[int] = Field(default=None, ge=0, le=100)   # absent when not found

    # supporting counts, filled per source
    nice_count: Optional[int] = None
    naughty_count: Optional[int] = None
    nice_percentage: Optional[int] = None
    naughty_percentage: Optional[int] = None
    nice_examples: Optional[List[Example]] = None
    naughty_examples: Optional[List[Example]] = None
    total_analyzed: Optional[int] = None
    comments_analyzed: Optional[int] = None
    snippets_analyzed: Optional[int] = None
    repos: Optional[int] = None
    followers: Optional[int] = None
    recent_activity: Optional[int] = None
    outlets: Optional[List[str]] = None       # news domains, first-seen order
    details: Optional[str] = None

    @computed_field
    @property
    def verdict(self) -> Optional[Verdict]:
        if not self.found or self.score is None:
            return None
        return verdict_for(self.score)

    @classmethod
    def missing(cls) -> "SourceResult":
        return cls(found=False)


class BreakdownEntry(SourceResult):
    weight_percent: int


class AggregateResult(WireModel):
    final_score: int = Field(ge=0, le=100)
    verdict: Verdict
    breakdown: Dict[str, BreakdownEntry]
    sources_found: int


class UserProfile(WireModel):
    username: str
    name: str
    profile_image: str
    description: str = ""
    followers: Count = "—"
    following: Count = "—"
    tweets: Count = "—"


class AnalyzeRequest(WireModel):
    username: Optional[str] = None           # validated by the route, 400 when blank
    demo: bool = False


class SingleSourceResponse(WireModel):
    user: UserProfile
    analysis: SourceResult
    is_demo: bool
    data_source: str


class MultiSourceResponse(WireModel):
    user: UserProfile
    final_score: int
    verdict: Verdict
    breakdown: Dict[str, BreakdownEntry]
    sources_found: int
    weights: Dict[str, float]


class ChatMessage(WireModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(WireModel):
    username: Optional[str] = None
    message: Optional[str] = None
    conversation_history: List[ChatMessage] = Field(default_factory=list)


class ChatResponse(WireModel):
    message: str
    username: Optional[str] = None
    twitter_data: Optional[UserProfile] = None
    tweets_found: int
