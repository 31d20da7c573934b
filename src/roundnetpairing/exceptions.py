"""Exceptions for use in Roundnet Pairing"""

# Roundnet Pairing
# Copyright (C) 2025  Roundnet Pairing developers
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


class RoundnetPairingException(Exception):
    """Base exception for all Roundnet Pairing errors.

    Catch this to handle any error raised by the pairing engine or the
    tournament layer.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(RoundnetPairingException):
    """Errors while building groups, teams or matches for a round."""

    pass


class InvalidPairingException(PairingException):
    """Raised when a pairing request is invalid (e.g., more byes than players)."""

    pass


class OddGroupSizeException(PairingException):
    """Raised when players or teams cannot be split into pairs."""

    pass


class GroupTooLargeException(PairingException):
    """Raised when a group exceeds the size that can be enumerated exhaustively."""

    pass


class NoPairingAvailableException(PairingException):
    """Raised when a group has no team or match arrangement at all."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(RoundnetPairingException):
    """Errors from the tournament lifecycle."""

    pass


class TournamentStateException(TournamentException):
    """Raised for operations out of order, such as pairing before start()."""

    pass


class RoundNotFoundException(TournamentException):
    """Raised for a round number that has not been generated."""

    pass


class MatchNotFoundException(TournamentException):
    """Raised when a requested match does not exist in the round."""

    pass


class DuplicatePlayerException(TournamentException):
    """Raised when a player id is already on the roster."""

    pass


# ========== Player Exceptions ==========


class PlayerException(RoundnetPairingException):
    """Errors about individual players."""

    pass


class PlayerNotFoundException(PlayerException):
    """Raised for a player id that is not on the roster."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when a player record cannot be built from the given data."""

    pass


# ========== Result Exceptions ==========


class ResultException(RoundnetPairingException):
    """Errors while entering match scores."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result is invalid (e.g., negative or tied scores)."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(RoundnetPairingException):
    """Input checks that failed in a ``*_strict`` validator."""

    pass


class PlayerCountValidationException(ValidationException):
    """Raised when the number of players is outside the allowed bounds."""

    pass


class GroupConfigurationException(ValidationException):
    """Raised when a custom group configuration does not fit the player count."""

    pass


class SkillRatingValidationException(ValidationException):
    """Raised when an initial skill rating is out of range."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(RoundnetPairingException):
    """Errors in tournament settings."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised for an unknown mode or scoring system, or bad bye points."""

    pass
