from case_data import NOT_RELEVANT
from evidence import resolve_evidence
from models import Solution


def test_means_priority_category_uses_means_item():
    means = {"rope": {"solution": "rope", "cause of death": "suffocation"}}
    clues = {"mud": {"solution": "mud", "cause of death": "drowning in mud"}}

    answer = resolve_evidence("cause of death", Solution("rope", "mud"), means, clues)

    assert answer == "suffocation"


def test_clue_priority_category_prefers_clue_item():
    solution = Solution("ice skates", "take-out food")

    assert resolve_evidence("weather", solution) == "pouring rain"


def test_falls_back_to_secondary_item():
    solution = Solution("ice skates", "book")

    assert resolve_evidence("weather", solution) == "cold"
    assert resolve_evidence("cause of death", solution) == "loss of blood"


def test_category_unknown_to_both_items_is_not_relevant():
    solution = Solution("scissors", "take-out food")

    assert resolve_evidence("motive", solution) == NOT_RELEVANT


def test_resolution_is_repeatable():
    solution = Solution("wine", "diary")

    answers = {resolve_evidence("motive", solution) for _ in range(5)}

    assert answers == {"unrequited love"}


def test_hint_on_body_part_is_means_priority():
    solution = Solution("scarf", "take-out food")

    assert resolve_evidence("hint on body part", solution) == "marks around the neck"
