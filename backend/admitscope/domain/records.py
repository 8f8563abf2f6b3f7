"""
Persisted Record Contracts for AdmitScope

Narrow Pydantic views of the applicant, institution and admission-case rows
owned by the storage layer. Adapters validate whatever the storage layer
hands over (dicts with camelCase keys, or ORM rows) into these models before
extracting engine metrics, so the engine never touches the storage schema.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """Base for record contracts: camelCase or snake_case, dicts or ORM rows."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
        frozen=True,
    )


class StandardizedScoreRecord(RecordModel):
    """One standardized test result (SAT, ACT, TOEFL, ...)."""
    type: str
    score: Optional[float] = None

    @field_validator("type")
    @classmethod
    def normalize_type(cls, v: str) -> str:
        return v.strip().upper()


class ActivityRecord(RecordModel):
    name: Optional[str] = None
    category: Optional[str] = None
    role: Optional[str] = None
    hours_per_week: Optional[float] = None
    weeks_per_year: Optional[float] = None


class CompetitionRecord(RecordModel):
    name: Optional[str] = None
    tier: Optional[int] = None


class AwardRecord(RecordModel):
    name: Optional[str] = None
    level: Optional[str] = None  # INTERNATIONAL, NATIONAL, STATE, REGIONAL, SCHOOL
    competition: Optional[CompetitionRecord] = None

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: Optional[str]) -> Optional[str]:
        return v.strip().upper() if v else v


class ProfileRecord(RecordModel):
    """Applicant profile with its test scores, activities and awards."""
    id: Optional[str] = None
    user_id: Optional[str] = None
    gpa: Optional[float] = None
    gpa_scale: Optional[float] = None
    test_scores: List[StandardizedScoreRecord] = Field(default_factory=list)
    activities: List[ActivityRecord] = Field(default_factory=list)
    awards: List[AwardRecord] = Field(default_factory=list)

    @field_validator("id", "user_id", mode="before")
    @classmethod
    def coerce_identifier(cls, v):
        return str(v) if v is not None else v

    @field_validator("test_scores", "activities", "awards", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v


class SchoolRecord(RecordModel):
    """Institution admission statistics as stored."""
    id: Optional[str] = None
    name: str = ""
    name_zh: Optional[str] = None
    acceptance_rate: Optional[float] = None  # percent
    us_news_rank: Optional[int] = None
    sat_avg: Optional[float] = None
    sat25: Optional[float] = None
    sat75: Optional[float] = None
    act_avg: Optional[float] = None
    act25: Optional[float] = None
    act75: Optional[float] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_identifier(cls, v):
        return str(v) if v is not None else v

    @property
    def display_name(self) -> str:
        return self.name_zh or self.name


class AdmissionCaseRecord(RecordModel):
    """
    A reported admission outcome.

    Score fields may hold a single number or a range such as "1550-1600".
    """
    school_id: Optional[str] = None
    school_name: Optional[str] = None
    result: Optional[str] = None  # ADMITTED, REJECTED, WAITLISTED, DEFERRED
    gpa_range: Optional[Union[float, str]] = None
    sat_range: Optional[Union[float, str]] = None
    toefl_range: Optional[Union[float, str]] = None

    @field_validator("result")
    @classmethod
    def normalize_result(cls, v: Optional[str]) -> Optional[str]:
        return v.strip().upper() if v else v

    @property
    def is_admitted(self) -> bool:
        return self.result == "ADMITTED"
