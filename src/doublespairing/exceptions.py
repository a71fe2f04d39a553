"""Exceptions for use in Doubles Pairing"""

# Doubles Pairing
# Copyright (C) 2025  Doubles Pairing developers
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


class DoublesPairingException(Exception):
    """Base exception for all Doubles Pairing errors.

    Constraint failures during scheduling are not errors; they are handled
    by relaxation and repair. These exceptions signal invalid input only.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(DoublesPairingException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when a pair would contain the same player twice."""

    pass


class InvalidMatchException(PairingException):
    """Raised when a match record is malformed (e.g. unknown side)."""

    pass


# ========== Player Exceptions ==========


class PlayerException(DoublesPairingException):
    """Base exception for player-related errors."""

    pass


class PlayerNotFoundException(PlayerException):
    """Raised when a referenced player id is not on the roster."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(DoublesPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when tournament settings are invalid."""

    pass


# ========== File Exceptions ==========


class FileLoadException(DoublesPairingException):
    """Raised when a schedule or roster document cannot be loaded."""

    pass
