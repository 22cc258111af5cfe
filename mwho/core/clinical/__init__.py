"""
Clinical Classification Layer

Maps a disease group's answers to a modified WHO (mWHO) pregnancy risk
class, notes and guidance.

Usage:
    from mwho.core.clinical import ClassificationEngine, DiseaseGroup

    engine = ClassificationEngine()
    result = engine.classify(DiseaseGroup.CONGENITAL, {"Fontan": "complicated"})
"""
from .base import (
    MWHOClass,
    SEVERITY_ORDER,
    DiseaseGroup,
    ClassificationResult,
    combine,
    highest,
    display_label,
    parse_class,
    parse_group,
)
from .guidance import GuidanceRecord, GUIDANCE, DISCLAIMER, lookup
from .questions import AnswerSet, Question, Questionnaire, QUESTIONNAIRES
from .engine import ClassificationEngine

__all__ = [
    "MWHOClass",
    "SEVERITY_ORDER",
    "DiseaseGroup",
    "ClassificationResult",
    "combine",
    "highest",
    "display_label",
    "parse_class",
    "parse_group",
    "GuidanceRecord",
    "GUIDANCE",
    "DISCLAIMER",
    "lookup",
    "AnswerSet",
    "Question",
    "Questionnaire",
    "QUESTIONNAIRES",
    "ClassificationEngine",
]
