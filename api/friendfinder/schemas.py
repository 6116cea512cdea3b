from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Interest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None


class Lifestyle(BaseModel):
    model_config = ConfigDict(extra="ignore")

    drinking: str | None = None
    smoking: str | None = None
    exercise: str | None = None
    pets: str | None = None


class Profile(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    interests: list[str | Interest | None] = Field(default_factory=list)
    job_title: str | None = Field(default=None, validation_alias=AliasChoices("job_title", "jobTitle"))
    job: str | None = None
    age: int | None = Field(default=None, ge=0)
    location: str | None = None
    lifestyle: Lifestyle = Field(default_factory=Lifestyle)
    education: str | None = None

    @field_validator("interests", mode="before")
    @classmethod
    def _null_interests(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("lifestyle", mode="before")
    @classmethod
    def _null_lifestyle(cls, value: Any) -> Any:
        return {} if value is None else value


class CalculateMatchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user1: Profile | None = Field(default=None, validation_alias=AliasChoices("user1", "user1Data"))
    user2: Profile | None = Field(default=None, validation_alias=AliasChoices("user2", "user2Data"))
    user_id: str | None = Field(default=None, validation_alias=AliasChoices("user_id", "userId"))
    target_user_id: str | None = Field(
        default=None, validation_alias=AliasChoices("target_user_id", "targetUserId")
    )


class ScoreBreakdownResponse(BaseModel):
    hobbies: float
    job: float
    age: float
    location: float
    lifestyle: float
    education: float


class MatchResultResponse(BaseModel):
    score: int
    compatible: bool
    breakdown: ScoreBreakdownResponse
    source: str | None = None


class RankCandidateInput(BaseModel):
    user_id: str = Field(validation_alias=AliasChoices("user_id", "userId", "id"))
    profile: Profile = Field(default_factory=Profile)

    @field_validator("user_id", mode="before")
    @classmethod
    def _numeric_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class RankRequest(BaseModel):
    user: Profile
    user_id: str | None = Field(default=None, validation_alias=AliasChoices("user_id", "userId"))
    candidates: list[RankCandidateInput] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)
    min_score: int = Field(default=0, ge=0, le=100)
    limit: int | None = Field(default=None, ge=1)


class RankedCandidateResponse(BaseModel):
    user_id: str
    score: int
    compatible: bool
    breakdown: ScoreBreakdownResponse


class RankResponse(BaseModel):
    results: list[RankedCandidateResponse]
