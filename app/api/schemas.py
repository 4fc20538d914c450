from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ExtractResponse(BaseModel):
    text: str


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume: str = ""
    job_desc: str = Field(default="", alias="jobDesc")


class AnalyzeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    analysis: str
    top_terms: list[str] = Field(alias="topTerms")
    missing_terms: list[str] = Field(alias="missingTerms")
    suggestions: list[str]


class RewriteRequest(BaseModel):
    resume: str = ""
    jd: str = ""


class RewriteResponse(BaseModel):
    bullets: list[str]


class BulletsDocxRequest(BaseModel):
    bullets: Any = None
    title: str = "AI Suggested Resume Bullets"


class DraftDownloadRequest(BaseModel):
    title: str | None = None
    text: str = ""


class LeadRequest(BaseModel):
    email: str | None = None
    ts: int | str | None = None
    ua: str | None = None


class LeadResponse(BaseModel):
    ok: bool = True
