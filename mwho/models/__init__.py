"""API request/response models."""
from .assessment import (
    ClassifyRequest,
    ClassificationResponse,
    GroupInfo,
    GroupListResponse,
    GuidanceResponse,
    HealthResponse,
    OptionModel,
    QuestionModel,
    QuestionnaireResponse,
    SummaryResponse,
)

__all__ = [
    "ClassifyRequest",
    "ClassificationResponse",
    "GroupInfo",
    "GroupListResponse",
    "GuidanceResponse",
    "HealthResponse",
    "OptionModel",
    "QuestionModel",
    "QuestionnaireResponse",
    "SummaryResponse",
]
