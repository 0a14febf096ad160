import pytest

from core.exceptions import UnknownLabelError, ValidationError
from trips.experience import Experience, parse, rank, worst_of


def test_rank_orders_labels_worst_to_best() -> None:
    labels = ["very bad", "bad", "neutral", "good", "very good"]
    assert [rank(label) for label in labels] == [0, 1, 2, 3, 4]


def test_rank_accepts_enum_members() -> None:
    assert rank(Experience.NEUTRAL) == 2


def test_rank_rejects_unknown_label() -> None:
    with pytest.raises(UnknownLabelError) as excinfo:
        rank("amazing")
    assert excinfo.value.details == {"label": "amazing"}


def test_unknown_label_is_a_validation_error() -> None:
    with pytest.raises(ValidationError):
        parse("Good")


@pytest.mark.parametrize(
    ("labels", "expected"),
    [
        (["good"], Experience.GOOD),
        (["good", "neutral"], Experience.NEUTRAL),
        (["good", "neutral", "bad"], Experience.BAD),
        (["very good", "bad"], Experience.BAD),
        (["very bad", "very good"], Experience.VERY_BAD),
    ],
)
def test_worst_of_returns_lowest_rank(labels: list[str], expected: Experience) -> None:
    assert worst_of(labels) == expected


def test_worst_of_is_idempotent_for_repeats() -> None:
    assert worst_of(["good", "good", "good"]) == Experience.GOOD


def test_worst_of_does_not_compare_strings_lexically() -> None:
    # "very good" sorts before "neutral" alphabetically
    assert worst_of(["very good", "neutral"]) == Experience.NEUTRAL


def test_worst_of_requires_labels() -> None:
    with pytest.raises(ValueError):
        worst_of([])


def test_experience_compares_equal_to_its_label() -> None:
    assert Experience.VERY_GOOD == "very good"
    assert str(Experience.VERY_BAD) == "very bad"
