"""Testing module for Foosball Pairing.

This module provides session simulation for exercising the pairing engine,
round generator and match lifecycle end to end.

Use the CLI: foosball-test
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

from foosballpairing.testing.simulator import (
    SessionSimulator,
    SimulationConfig,
    create_club_session,
    create_small_session,
)

__all__ = [
    "SessionSimulator",
    "SimulationConfig",
    "create_small_session",
    "create_club_session",
]
