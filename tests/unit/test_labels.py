import pytest

from saintluc.presentation.labels import ENGLISH, FRENCH, get_labels
from saintluc.scoring.models import PATIENT_FIELDS


class TestGetLabels:
    def test_english(self) -> None:
        assert get_labels("en") is ENGLISH

    def test_french(self) -> None:
        assert get_labels("fr") is FRENCH

    def test_is_case_insensitive(self) -> None:
        assert get_labels("FR") is FRENCH

    def test_raises_for_unknown_locale(self) -> None:
        with pytest.raises(ValueError, match="Unknown locale"):
            get_labels("de")


class TestLabelTables:
    @pytest.mark.parametrize("labels", [ENGLISH, FRENCH])
    def test_every_field_has_a_label(self, labels) -> None:  # type: ignore[no-untyped-def]
        assert set(labels.fields) == set(PATIENT_FIELDS)

    @pytest.mark.parametrize("labels", [ENGLISH, FRENCH])
    def test_option_values_match_domains(self, labels) -> None:  # type: ignore[no-untyped-def]
        values = {field: sorted(v for _, v in opts) for field, opts in labels.options.items()}
        assert values == {
            "gender": [0, 1],
            "surgical_indication": [0, 1],
            "asa_score": [1, 2, 3, 4],
            "treated_hta": [0, 1],
        }

    def test_english_recommendation(self) -> None:
        assert ENGLISH.recommendation(True) == "Post-operative blood test NECESSARY"
        assert ENGLISH.recommendation(False) == "Post-operative blood test NOT NECESSARY"

    def test_french_recommendation(self) -> None:
        assert FRENCH.recommendation(True) == "Bilan sanguin post-opératoire NÉCESSAIRE"
        assert FRENCH.recommendation(False) == "Bilan sanguin post-opératoire NON NÉCESSAIRE"
