"""
Pydantic models for the assessment API.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: str
    uptime_seconds: float


class GroupInfo(BaseModel):
    name: str
    description: str


class GroupListResponse(BaseModel):
    groups: List[GroupInfo]


class OptionModel(BaseModel):
    label: str
    value: str


class QuestionModel(BaseModel):
    key: str
    label: str
    options: List[OptionModel]


class QuestionnaireResponse(BaseModel):
    group: str
    description: str
    hint: str = ""
    questions: List[QuestionModel]


class ClassifyRequest(BaseModel):
    """Answers collected so far for one disease group."""
    group: str = Field(..., description="Disease group label or alias, e.g. 'Valvular'")
    answers: Dict[str, str] = Field(
        default_factory=dict,
        description="Question key → selected option value; omit unanswered questions",
    )
    strict: bool = Field(
        default=True,
        description="Reject keys/values outside the group's question catalogue",
    )

    class Config:
        json_schema_extra = {"example": {
            "group": "Valvular",
            "answers": {"MVP_present": "yes", "MR_sev": "moderate"},
            "strict": True,
        }}


class GuidanceResponse(BaseModel):
    mwho_class: str
    label: str
    maternal: str
    fetal: str
    care: str
    delivery: str


class ClassificationResponse(BaseModel):
    group: str
    mwho_class: Optional[str] = None
    label: str
    notes: List[str] = []
    guidance: Optional[Dict[str, str]] = None


class SummaryResponse(BaseModel):
    group: str
    mwho_class: Optional[str] = None
    summary: str
    disclaimer: str
