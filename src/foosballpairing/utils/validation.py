"""Validation utilities for Foosball Pairing.

This module provides reusable validation functions with consistent error handling.
"""

# Foosball Pairing
# Copyright (C) 2025  Foosball Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Any, Optional

from foosballpairing.constants import (
    MAX_WINNING_SCORE,
    MIN_WINNING_SCORE,
    SHUTOUT_BONUS_CHOICES,
)
from foosballpairing.exceptions import (
    InvalidConfigurationException,
    PlayerNameValidationException,
)

MAX_NAME_LENGTH = 40


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Player Name Validation ==========


def validate_player_name(name: Optional[str]) -> ValidationResult:
    """Validate a player's display name.

    Surrounding whitespace is stripped and inner runs of whitespace are
    collapsed to a single space.

    Args:
        name: Name to validate

    Returns:
        ValidationResult with the normalized name

    Example:
        >>> validate_player_name("  Ana   Rita ").sanitized_value
        'Ana Rita'
    """
    if name is None or not str(name).strip():
        return ValidationResult(
            is_valid=False,
            error_message="Player name is required",
        )

    cleaned = " ".join(str(name).split())
    if len(cleaned) > MAX_NAME_LENGTH:
        return ValidationResult(
            is_valid=False,
            error_message=f"Player name must be at most {MAX_NAME_LENGTH} characters: {cleaned}",
        )

    return ValidationResult(is_valid=True, sanitized_value=cleaned)


def validate_player_name_strict(name: Optional[str]) -> str:
    """Validate a player name and return it or raise exception.

    Raises:
        PlayerNameValidationException: If name is invalid
    """
    result = validate_player_name(name)
    if not result.is_valid:
        raise PlayerNameValidationException(result.error_message)
    return result.sanitized_value


# ========== Settings Validation ==========


def validate_winning_score(score: Any) -> ValidationResult:
    """Validate the score a team needs to win a match.

    Args:
        score: Candidate winning score

    Returns:
        ValidationResult with the score as an int
    """
    if isinstance(score, bool):
        return ValidationResult(
            is_valid=False,
            error_message=f"Winning score must be a number: {score}",
        )
    try:
        score_int = int(score)
    except (ValueError, TypeError):
        return ValidationResult(
            is_valid=False,
            error_message=f"Winning score must be a number: {score}",
        )

    if score_int < MIN_WINNING_SCORE or score_int > MAX_WINNING_SCORE:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Winning score must be between {MIN_WINNING_SCORE} and "
                f"{MAX_WINNING_SCORE}: {score_int}"
            ),
        )

    return ValidationResult(is_valid=True, sanitized_value=score_int)


def validate_winning_score_strict(score: Any) -> int:
    """Validate winning score and return integer or raise exception.

    Raises:
        InvalidConfigurationException: If score is invalid
    """
    result = validate_winning_score(score)
    if not result.is_valid:
        raise InvalidConfigurationException(result.error_message)
    return result.sanitized_value


def validate_shutout_bonus(bonus: Any) -> ValidationResult:
    """Validate the bonus points awarded for a shutout win."""
    if isinstance(bonus, bool) or bonus not in SHUTOUT_BONUS_CHOICES:
        choices = ", ".join(str(c) for c in SHUTOUT_BONUS_CHOICES)
        return ValidationResult(
            is_valid=False,
            error_message=f"Shutout bonus must be one of {choices}: {bonus}",
        )
    return ValidationResult(is_valid=True, sanitized_value=int(bonus))


def validate_shutout_bonus_strict(bonus: Any) -> int:
    """Validate shutout bonus and return integer or raise exception.

    Raises:
        InvalidConfigurationException: If bonus is invalid
    """
    result = validate_shutout_bonus(bonus)
    if not result.is_valid:
        raise InvalidConfigurationException(result.error_message)
    return result.sanitized_value
