import pytest

from foosballpairing.exceptions import InvalidConfigurationException
from foosballpairing.utils.validation import (
    MAX_NAME_LENGTH,
    validate_player_name,
    validate_shutout_bonus,
    validate_winning_score,
    validate_winning_score_strict,
)


def test_player_name_is_normalized():
    result = validate_player_name("  Ana \t Rita ")
    assert result
    assert result.sanitized_value == "Ana Rita"


@pytest.mark.parametrize("name", [None, "", "   ", "x" * (MAX_NAME_LENGTH + 1)])
def test_invalid_player_names(name):
    result = validate_player_name(name)
    assert not result
    assert result.error_message


@pytest.mark.parametrize("score, expected", [(1, 1), ("10", 10), (20, 20)])
def test_valid_winning_scores(score, expected):
    assert validate_winning_score(score).sanitized_value == expected


@pytest.mark.parametrize("score", [0, 21, -3, "ten", None, True])
def test_invalid_winning_scores(score):
    assert not validate_winning_score(score)
    with pytest.raises(InvalidConfigurationException):
        validate_winning_score_strict(score)


def test_shutout_bonus_choices():
    assert [validate_shutout_bonus(b).is_valid for b in (0, 1, 2, 3, -1)] == [
        True,
        True,
        True,
        False,
        False,
    ]
    assert not validate_shutout_bonus(False)
