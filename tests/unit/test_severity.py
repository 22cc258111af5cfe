"""
Unit Tests for the Severity Order and Reducer

`combine` must behave as max over the fixed order with None as identity,
checked exhaustively over the six-element domain.
"""
import itertools

import pytest

from mwho.core.clinical import (
    MWHOClass,
    SEVERITY_ORDER,
    combine,
    highest,
    display_label,
    parse_class,
    parse_group,
    DiseaseGroup,
)
from mwho.utils import UnknownClassError, UnknownGroupError


DOMAIN = [None] + list(SEVERITY_ORDER)


class TestSeverityOrder:
    """Tests for the fixed class order."""

    def test_canonical_order(self):
        assert [c.value for c in SEVERITY_ORDER] == ["I", "II", "II–III", "III", "IV"]

    def test_rank_matches_position(self):
        for i, cls in enumerate(SEVERITY_ORDER):
            assert cls.rank == i

    def test_intermediate_band_uses_en_dash(self):
        assert MWHOClass.II_III.value == "II–III"

    def test_labels(self):
        assert MWHOClass.III.label == "mWHO III"
        assert display_label(MWHOClass.II_III) == "mWHO II–III"
        assert display_label(None) == "–"


class TestCombine:
    """Algebraic properties of combine."""

    @pytest.mark.parametrize("a", DOMAIN)
    def test_none_is_identity(self, a):
        assert combine(None, a) == a
        assert combine(a, None) == a

    @pytest.mark.parametrize("a,b", list(itertools.product(DOMAIN, repeat=2)))
    def test_commutative(self, a, b):
        assert combine(a, b) == combine(b, a)

    def test_associative_exhaustive(self):
        for a, b, c in itertools.product(DOMAIN, repeat=3):
            assert combine(combine(a, b), c) == combine(a, combine(b, c)), (a, b, c)

    def test_returns_later_in_order(self):
        for a, b in itertools.product(SEVERITY_ORDER, repeat=2):
            expected = a if SEVERITY_ORDER.index(a) >= SEVERITY_ORDER.index(b) else b
            assert combine(a, b) is expected

    def test_idempotent(self):
        for a in DOMAIN:
            assert combine(a, a) == a

    def test_result_stays_in_domain(self):
        for a, b in itertools.product(DOMAIN, repeat=2):
            assert combine(a, b) in DOMAIN


class TestHighest:
    """Folding many candidates."""

    def test_empty_is_none(self):
        assert highest([]) is None

    def test_all_none(self):
        assert highest([None, None]) is None

    def test_picks_most_severe(self):
        assert highest([MWHOClass.I, MWHOClass.IV, MWHOClass.II]) is MWHOClass.IV

    def test_intermediate_band_beats_ii(self):
        assert highest([MWHOClass.II, MWHOClass.II_III]) is MWHOClass.II_III
        assert highest([MWHOClass.III, MWHOClass.II_III]) is MWHOClass.III


class TestParsing:
    """Tests for label/alias parsing at the boundary."""

    @pytest.mark.parametrize("label,expected", [
        ("I", MWHOClass.I),
        ("ii", MWHOClass.II),
        ("II–III", MWHOClass.II_III),
        ("II-III", MWHOClass.II_III),
        ("mWHO III", MWHOClass.III),
        (" IV ", MWHOClass.IV),
    ])
    def test_parse_class(self, label, expected):
        assert parse_class(label) is expected

    def test_parse_class_passthrough(self):
        assert parse_class(MWHOClass.IV) is MWHOClass.IV

    @pytest.mark.parametrize("label", ["V", "", "III-IV", "class 2"])
    def test_parse_class_unknown(self, label):
        with pytest.raises(UnknownClassError) as exc_info:
            parse_class(label)
        assert exc_info.value.code == "UNKNOWN_CLASS"
        assert exc_info.value.details["label"] == label

    @pytest.mark.parametrize("name,expected", [
        ("Valvular", DiseaseGroup.VALVULAR),
        ("Ventricular/PH/PPCM", DiseaseGroup.VENTRICULAR),
        ("ventricular", DiseaseGroup.VENTRICULAR),
        ("Coronary/Other", DiseaseGroup.CORONARY_OTHER),
        ("coronary-other", DiseaseGroup.CORONARY_OTHER),
        ("AORTOPATHY", DiseaseGroup.AORTOPATHY),
        ("chd", DiseaseGroup.CONGENITAL),
    ])
    def test_parse_group(self, name, expected):
        assert parse_group(name) is expected

    def test_parse_group_unknown(self):
        with pytest.raises(UnknownGroupError) as exc_info:
            parse_group("Oncology")
        err = exc_info.value
        assert err.code == "UNKNOWN_GROUP"
        assert err.to_dict()["details"]["group"] == "Oncology"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
