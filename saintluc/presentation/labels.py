"""Hardcoded English and French strings for the form and the result."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Labels:
    """User-facing strings for one locale."""

    title: str
    fields: dict[str, str]
    options: dict[str, list[tuple[str, int]]] = field(default_factory=dict)
    score: str = "Score"
    test_necessary: str = ""
    test_not_necessary: str = ""

    def recommendation(self, recommend_blood_test: bool) -> str:
        return self.test_necessary if recommend_blood_test else self.test_not_necessary


_ASA_OPTIONS = [("1", 1), ("2", 2), ("3", 3), ("4", 4)]

ENGLISH = Labels(
    title="Saint Luc Score",
    fields={
        "age": "Age",
        "gender": "Gender",
        "surgical_indication": "Surgical Indication",
        "asa_score": "ASA Score",
        "treated_hta": "Treated HTA",
        "preop_emoglobin": "Preop hemoglobin (g/dl)",
    },
    options={
        "gender": [("Male", 1), ("Female", 0)],
        "surgical_indication": [("Osteonecrosis", 1), ("Arthritis", 0)],
        "asa_score": _ASA_OPTIONS,
        "treated_hta": [("Yes", 1), ("No", 0)],
    },
    score="Score",
    test_necessary="Post-operative blood test NECESSARY",
    test_not_necessary="Post-operative blood test NOT NECESSARY",
)

FRENCH = Labels(
    title="Score Saint Luc",
    fields={
        "age": "Âge",
        "gender": "Sexe",
        "surgical_indication": "Indication chirurgicale",
        "asa_score": "Score ASA",
        "treated_hta": "HTA traitée",
        "preop_emoglobin": "Hémoglobine préopératoire (g/dl)",
    },
    options={
        "gender": [("Homme", 1), ("Femme", 0)],
        "surgical_indication": [("Ostéonécrose", 1), ("Arthrose", 0)],
        "asa_score": _ASA_OPTIONS,
        "treated_hta": [("Oui", 1), ("Non", 0)],
    },
    score="Score",
    test_necessary="Bilan sanguin post-opératoire NÉCESSAIRE",
    test_not_necessary="Bilan sanguin post-opératoire NON NÉCESSAIRE",
)

LABELS: dict[str, Labels] = {"en": ENGLISH, "fr": FRENCH}


def get_labels(locale: str) -> Labels:
    labels = LABELS.get(locale.lower())
    if labels is None:
        raise ValueError(f"Unknown locale '{locale}'. Choose from: {list(LABELS)}")
    return labels
