"""
Unit Tests for Guidance Lookup and the Plain-Text Summary
"""
import pytest

from mwho.core.clinical import (
    ClassificationResult,
    DiseaseGroup,
    GUIDANCE,
    GuidanceRecord,
    MWHOClass,
    SEVERITY_ORDER,
    DISCLAIMER,
    lookup,
)
from mwho.core.reports import build_summary


class TestGuidance:
    """Tests for the class-indexed guidance records."""

    @pytest.mark.parametrize("mwho_class", SEVERITY_ORDER)
    def test_lookup_is_total(self, mwho_class):
        record = lookup(mwho_class)
        assert isinstance(record, GuidanceRecord)
        for field_name in ("maternal", "fetal", "care", "delivery"):
            assert getattr(record, field_name)

    def test_one_record_per_class(self):
        assert set(GUIDANCE) == set(SEVERITY_ORDER)

    def test_class_iv_contraindicates_pregnancy(self):
        assert "not recommended" in lookup(MWHOClass.IV).maternal

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            GUIDANCE[MWHOClass.I] = lookup(MWHOClass.IV)

    def test_record_is_frozen(self):
        with pytest.raises(AttributeError):
            lookup(MWHOClass.I).care = "changed"

    def test_to_dict(self):
        data = lookup(MWHOClass.II).to_dict()
        assert set(data) == {"maternal", "fetal", "care", "delivery"}
        assert data["care"].startswith("Shared care with cardiology")

    def test_disclaimer(self):
        assert "not a substitute for clinical judgement" in DISCLAIMER


class TestSummary:
    """Tests for the exported plain-text summary."""

    def test_conclusive_result(self):
        result = ClassificationResult(MWHOClass.IV, [])
        guidance = lookup(MWHOClass.IV)

        summary = build_summary(DiseaseGroup.CONGENITAL, result)

        assert summary.splitlines() == [
            "Group: Congenital",
            "Result: mWHO IV",
            f"Maternal risk: {guidance.maternal}",
            f"Fetal risk: {guidance.fetal}",
            f"Care level: {guidance.care}",
            f"Delivery guidance: {guidance.delivery}",
        ]

    def test_flags_line_joins_notes(self):
        result = ClassificationResult(MWHOClass.IV, ["first flag", "second flag"])
        summary = build_summary(DiseaseGroup.AORTOPATHY, result)
        assert summary.splitlines()[-1] == "Flags: first flag; second flag"

    def test_no_flags_line_without_notes(self):
        summary = build_summary(DiseaseGroup.ARRHYTHMIA, ClassificationResult(MWHOClass.I, []))
        assert "Flags:" not in summary

    def test_inconclusive_result(self):
        summary = build_summary(DiseaseGroup.AORTOPATHY, ClassificationResult(None, []))
        assert summary == (
            "Group: Aortopathy\n"
            "Result: –\n"
            "Maternal risk: \n"
            "Fetal risk: \n"
            "Care level: \n"
            "Delivery guidance:"
        )

    def test_inconclusive_result_keeps_flags(self):
        summary = build_summary(DiseaseGroup.VALVULAR, ClassificationResult(None, ["check MR"]))
        assert summary.endswith("Delivery guidance: \nFlags: check MR")

    def test_no_group(self):
        summary = build_summary(None, ClassificationResult(None, []))
        assert summary.startswith("Group: –\nResult: –")

    def test_intermediate_band_label(self):
        summary = build_summary(DiseaseGroup.VALVULAR, ClassificationResult(MWHOClass.II_III, []))
        assert "Result: mWHO II–III" in summary


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
