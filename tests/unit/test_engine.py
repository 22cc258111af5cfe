"""
Unit Tests for the Classification Engine

Tests dispatch by group, strict validation, guidance projection and
the JSON summary.
"""
import logging

import pytest

from mwho.core.clinical import (
    ClassificationEngine,
    ClassificationResult,
    DiseaseGroup,
    MWHOClass,
    lookup,
)
from mwho.utils import InvalidAnswerError, UnknownGroupError


class TestDispatch:
    """Group → rule function routing."""

    def test_registered_groups_in_display_order(self):
        assert [g.value for g in ClassificationEngine.registered_groups()] == [
            "Ventricular/PH/PPCM",
            "Cardiomyopathy",
            "Valvular",
            "Congenital",
            "Aortopathy",
            "Arrhythmia",
            "Coronary/Other",
        ]

    @pytest.mark.parametrize("group,answers,expected", [
        (DiseaseGroup.VENTRICULAR, {"PAH": "yes"}, MWHOClass.IV),
        (DiseaseGroup.CARDIOMYOPATHY, {"ARVC": "low-risk"}, MWHOClass.II_III),
        (DiseaseGroup.VALVULAR, {"MS": "moderate"}, MWHOClass.III),
        (DiseaseGroup.CONGENITAL, {"ASDVSDunoperated": "yes"}, MWHOClass.II),
        (DiseaseGroup.AORTOPATHY, {"NonHTADlt40": "yes"}, MWHOClass.I),
        (DiseaseGroup.ARRHYTHMIA, {"SVTorPacemaker": "yes"}, MWHOClass.II),
        (DiseaseGroup.CORONARY_OTHER, {"SCAD": "yes"}, MWHOClass.III),
    ])
    def test_routes_to_group_rules(self, engine, group, answers, expected):
        assert engine.classify(group, answers).mwho_class is expected

    def test_same_answers_differ_by_group(self, engine):
        answers = {"SCAD": "yes"}
        assert engine.classify(DiseaseGroup.CORONARY_OTHER, answers).mwho_class is MWHOClass.III
        assert engine.classify(DiseaseGroup.ARRHYTHMIA, answers).mwho_class is None

    def test_accepts_label_and_alias(self, engine):
        answers = {"Fontan": "complicated"}
        assert engine.classify("Congenital", answers).mwho_class is MWHOClass.IV
        assert engine.classify("congenital", answers).mwho_class is MWHOClass.IV

    def test_unknown_group(self, engine):
        with pytest.raises(UnknownGroupError):
            engine.classify("Renal", {})


class TestStrictMode:
    """Validation against the question catalogue."""

    def test_lenient_ignores_unknown_answers(self, engine):
        result = engine.classify(DiseaseGroup.VALVULAR, {"MS": "severe", "Bogus": "x"})
        assert result.mwho_class is MWHOClass.IV

    def test_strict_rejects_unknown_key(self, engine):
        with pytest.raises(InvalidAnswerError):
            engine.classify(DiseaseGroup.VALVULAR, {"MS": "severe", "Bogus": "x"}, strict=True)

    def test_strict_rejects_unknown_value(self, engine):
        with pytest.raises(InvalidAnswerError) as exc_info:
            engine.classify(DiseaseGroup.ARRHYTHMIA, {"SustainedVT": "Y"}, strict=True)
        assert exc_info.value.key == "SustainedVT"

    def test_strict_accepts_valid_answers(self, engine):
        result = engine.classify(
            DiseaseGroup.VENTRICULAR,
            {"PAH": "no", "LVEF": ">45%", "PPCM": "≤ mild residual"},
            strict=True,
        )
        assert result.mwho_class is MWHOClass.III


class TestGuidanceAndSummary:

    def test_guidance_for_conclusive_result(self):
        result = ClassificationResult(MWHOClass.III, [])
        assert ClassificationEngine.guidance_for(result) == lookup(MWHOClass.III)

    def test_no_guidance_without_class(self):
        assert ClassificationEngine.guidance_for(ClassificationResult(None, [])) is None

    def test_summarise(self, engine):
        result = engine.classify(DiseaseGroup.VALVULAR, {"MechanicalValve": "well-controlled"})
        summary = ClassificationEngine.summarise(DiseaseGroup.VALVULAR, result)

        assert summary["group"] == "Valvular"
        assert summary["mwho_class"] == "III"
        assert summary["label"] == "mWHO III"
        assert summary["notes"] == ["Mechanical valve on stable anticoagulation"]
        assert summary["guidance"] == lookup(MWHOClass.III).to_dict()

    def test_summarise_inconclusive(self):
        summary = ClassificationEngine.summarise(DiseaseGroup.AORTOPATHY, ClassificationResult(None, []))
        assert summary == {
            "group": "Aortopathy",
            "mwho_class": None,
            "label": "–",
            "notes": [],
            "guidance": None,
        }

    def test_questionnaire_by_alias(self):
        assert ClassificationEngine.questionnaire("aorta").group is DiseaseGroup.AORTOPATHY


class TestLogging:

    def test_logs_conclusive_class(self, engine, caplog):
        with caplog.at_level(logging.INFO, logger="mwho.core.clinical.engine"):
            engine.classify(DiseaseGroup.AORTOPATHY, {"BAVGt50": "yes"})
        assert "mWHO IV" in caplog.text
        assert "Severe BAV aortic dilation >50 mm" in caplog.text

    def test_inconclusive_logged_at_debug_only(self, engine, caplog):
        with caplog.at_level(logging.INFO, logger="mwho.core.clinical.engine"):
            engine.classify(DiseaseGroup.AORTOPATHY, {})
        assert caplog.text == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
