"""Exceptions for use in Foosball Pairing"""

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


# ========== Base Application Exception ==========


class FoosballPairingException(Exception):
    """Base exception for all Foosball Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(FoosballPairingException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when a team or match line-up is invalid (e.g. a repeated player)."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(FoosballPairingException):
    """Base exception for tournament-related errors."""

    pass


class DuplicatePlayerException(TournamentException):
    """Raised when attempting to add a player that already exists."""

    pass


# ========== Player Exceptions ==========


class PlayerException(FoosballPairingException):
    """Base exception for player-related errors."""

    pass


class PlayerNotFoundException(PlayerException):
    """Raised when a requested player cannot be found."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(FoosballPairingException):
    """Base exception for validation errors."""

    pass


class PlayerNameValidationException(ValidationException, InvalidPlayerDataException):
    """Raised when a player name is empty or too long."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(FoosballPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
