"""Profile-related Pydantic schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from devconnector.schemas.validators import RequestModel, require_text


class ProfileRequest(RequestModel):
    """
    Create or update the caller's profile.

    ``skills`` accepts a comma-separated string or a list; either way it is
    stored as a list of trimmed, non-empty names. Optional text fields left
    out of the request are stored as empty strings.
    """

    status: str | None = None
    skills: list[str] | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    githubusername: str | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: str | None) -> str:
        return require_text(v, "Status is required")

    @field_validator("skills", mode="before")
    @classmethod
    def validate_skills(cls, v: object) -> list[str]:
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, list):
            v = [str(skill).strip() for skill in v if str(skill).strip()]
        if not v:
            raise ValueError("Skills is required")
        return v


class ExperienceRequest(RequestModel):
    """Job entry to add to a profile."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    company: str | None = None
    from_date: date | None = Field(default=None, alias="from")
    to_date: date | None = Field(default=None, alias="to")
    location: str | None = None
    current: bool = False
    description: str | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str:
        return require_text(v, "Title is required")

    @field_validator("company")
    @classmethod
    def validate_company(cls, v: str | None) -> str:
        return require_text(v, "Company is required")

    @field_validator("from_date", mode="before")
    @classmethod
    def validate_from(cls, v: object) -> object:
        return require_text(v, "From date is required")

    @field_validator("to_date", mode="before")
    @classmethod
    def blank_to_none(cls, v: object) -> object:
        return v or None

    @field_validator("current", mode="before")
    @classmethod
    def null_current_is_false(cls, v: object) -> object:
        return False if v is None else v


class EducationRequest(RequestModel):
    """School entry to add to a profile."""

    model_config = ConfigDict(populate_by_name=True)

    school: str | None = None
    degree: str | None = None
    fieldofstudy: str | None = None
    from_date: date | None = Field(default=None, alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None

    @field_validator("school")
    @classmethod
    def validate_school(cls, v: str | None) -> str:
        return require_text(v, "School is required")

    @field_validator("degree")
    @classmethod
    def validate_degree(cls, v: str | None) -> str:
        return require_text(v, "Degree is required")

    @field_validator("fieldofstudy")
    @classmethod
    def validate_fieldofstudy(cls, v: str | None) -> str:
        return require_text(v, "Field of study is required")

    @field_validator("from_date", mode="before")
    @classmethod
    def validate_from(cls, v: object) -> object:
        return require_text(v, "From date is required")

    @field_validator("to_date", mode="before")
    @classmethod
    def blank_to_none(cls, v: object) -> object:
        return v or None

    @field_validator("current", mode="before")
    @classmethod
    def null_current_is_false(cls, v: object) -> object:
        return False if v is None else v


class ProfileUser(BaseModel):
    """Owner fields joined into every profile response."""

    id: str
    name: str
    avatar: str | None


class SocialLinks(BaseModel):
    youtube: str = ""
    twitter: str = ""
    facebook: str = ""
    linkedin: str = ""
    instagram: str = ""


class ExperienceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    company: str
    location: str
    from_date: str = Field(alias="from")
    to_date: str | None = Field(alias="to")
    current: bool
    description: str


class EducationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_date: str = Field(alias="from")
    to_date: str | None = Field(alias="to")
    current: bool
    description: str


class ProfileResponse(BaseModel):
    """Full profile with the owner's name and avatar."""

    id: str
    user: ProfileUser
    company: str
    website: str
    location: str
    status: str
    skills: list[str]
    bio: str
    githubusername: str
    social: SocialLinks
    experience: list[ExperienceResponse]
    education: list[EducationResponse]
    date: str
