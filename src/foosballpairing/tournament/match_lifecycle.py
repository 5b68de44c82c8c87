"""Lifecycle of a single match: activation, live scoring and completion.

A match moves ``scheduled -> active -> completed``. A scheduled or active
match may instead be discarded, after which the caller removes it from its
collection entirely. While active, every score edit is recorded in a linear
history that supports undo and redo; a new edit after an undo drops the
undone snapshots.
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

from typing import List, Optional

from foosballpairing.constants import (
    STATUS_ACTIVE,
    STATUS_COMPLETED,
    STATUS_SCHEDULED,
)
from foosballpairing.models import Match, TournamentSettings
from foosballpairing.type_hints import TEAM1, TEAM2, TEAM_SIDES, ScoreSnapshot, TeamSide
from foosballpairing.utils import now_ms, setup_logger

logger = setup_logger(__name__)

_START_SNAPSHOT: ScoreSnapshot = (0, 0)


class ScoreHistory:
    """Linear undo/redo history of (team1, team2) score snapshots.

    The first snapshot is always 0-0 and the cursor always points at a valid
    snapshot.
    """

    def __init__(self) -> None:
        self._snapshots: List[ScoreSnapshot] = [_START_SNAPSHOT]
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def snapshots(self) -> List[ScoreSnapshot]:
        """Copy of the recorded snapshots, oldest first."""
        return list(self._snapshots)

    @property
    def current(self) -> ScoreSnapshot:
        return self._snapshots[self._cursor]

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def peek_undo(self) -> Optional[ScoreSnapshot]:
        """Snapshot that undo() would restore, without moving the cursor."""
        return self._snapshots[self._cursor - 1] if self.can_undo else None

    def peek_redo(self) -> Optional[ScoreSnapshot]:
        """Snapshot that redo() would restore, without moving the cursor."""
        return self._snapshots[self._cursor + 1] if self.can_redo else None

    def push(self, snapshot: ScoreSnapshot) -> None:
        """Record a new snapshot, dropping anything after the cursor."""
        del self._snapshots[self._cursor + 1 :]
        self._snapshots.append(snapshot)
        self._cursor = len(self._snapshots) - 1

    def undo(self) -> Optional[ScoreSnapshot]:
        """Step back one snapshot; None at the start."""
        if not self.can_undo:
            return None
        self._cursor -= 1
        return self.current

    def redo(self) -> Optional[ScoreSnapshot]:
        """Step forward one snapshot; None at the newest."""
        if not self.can_redo:
            return None
        self._cursor += 1
        return self.current

    def __len__(self) -> int:
        return len(self._snapshots)


class MatchLifecycle:
    """State machine owning one match's live score.

    Misuse (scoring a match that is not active, finishing before a team has
    reached the winning score, ...) is answered with ``False`` or ``None``
    and a log warning. These are ordinary UI races, not errors.

    Attributes:
        match: The match being played; scores are edited in place
        settings: Settings in force; may be replaced between edits
        history: Score history while active, otherwise None
        discarded: Whether the match has been cancelled
    """

    def __init__(self, match: Match, settings: Optional[TournamentSettings] = None):
        self.match = match
        self.settings = settings if settings is not None else TournamentSettings()
        self.history: Optional[ScoreHistory] = None
        self.discarded = False
        if match.status == STATUS_ACTIVE:
            self.history = ScoreHistory()
            if match.scores != _START_SNAPSHOT:
                self.history.push(match.scores)

    @classmethod
    def resume(
        cls, match: Match, settings: Optional[TournamentSettings] = None
    ) -> "MatchLifecycle":
        """Rebuild the lifecycle of a match stored while active.

        The history restarts at 0-0, followed by the stored score if any goal
        had been scored.
        """
        return cls(match, settings)

    # ========== State ==========

    @property
    def status(self) -> str:
        return self.match.status

    @property
    def is_active(self) -> bool:
        return not self.discarded and self.match.status == STATUS_ACTIVE

    @property
    def can_undo(self) -> bool:
        return self.is_active and self.history is not None and self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.is_active and self.history is not None and self.history.can_redo

    def _reaches_target(self, score: int) -> bool:
        return score >= self.settings.winning_score

    @property
    def winner(self) -> Optional[TeamSide]:
        """The side at or above the winning score, if exactly one is."""
        team1_done = self._reaches_target(self.match.team1.score)
        team2_done = self._reaches_target(self.match.team2.score)
        if team1_done and not team2_done:
            return TEAM1
        if team2_done and not team1_done:
            return TEAM2
        return None

    @property
    def is_finishable(self) -> bool:
        """Whether finish() would complete the match now."""
        return self.is_active and self.winner is not None

    # ========== Transitions ==========

    def activate(self) -> bool:
        """Start a scheduled match with a fresh 0-0 history."""
        if self.discarded or self.match.status != STATUS_SCHEDULED:
            logger.warning(
                "Cannot activate match %s in state %s", self.match.id, self.match.status
            )
            return False
        self.match.status = STATUS_ACTIVE
        self.match.team1.score, self.match.team2.score = _START_SNAPSHOT
        self.history = ScoreHistory()
        logger.info("Match %s started", self.match.id)
        return True

    def _apply_scores(self, team1_score: int, team2_score: int) -> bool:
        if (team1_score, team2_score) == self.match.scores:
            return False
        if self._reaches_target(team1_score) and self._reaches_target(team2_score):
            logger.warning(
                "Rejected score %d-%d for match %s: both teams would reach %d",
                team1_score,
                team2_score,
                self.match.id,
                self.settings.winning_score,
            )
            return False
        self.match.team1.score = team1_score
        self.match.team2.score = team2_score
        self.history.push((team1_score, team2_score))
        return True

    def update_score(self, team: TeamSide, delta: int) -> bool:
        """Add ``delta`` goals to one team, never going below zero.

        Returns:
            True if the score changed and was recorded
        """
        if not self.is_active:
            logger.warning("Cannot score match %s: not active", self.match.id)
            return False
        if team not in TEAM_SIDES:
            logger.warning("Unknown team %r for match %s", team, self.match.id)
            return False
        new_score = max(0, self.match.team(team).score + delta)
        if team == TEAM1:
            return self._apply_scores(new_score, self.match.team2.score)
        return self._apply_scores(self.match.team1.score, new_score)

    def set_score(self, team1_score: int, team2_score: int) -> bool:
        """Set both scores directly; negative values are clamped to zero."""
        if not self.is_active:
            logger.warning("Cannot score match %s: not active", self.match.id)
            return False
        return self._apply_scores(max(0, team1_score), max(0, team2_score))

    def _can_restore(self, snapshot: Optional[ScoreSnapshot]) -> bool:
        if snapshot is None:
            return False
        if all(self._reaches_target(score) for score in snapshot):
            # winning score was lowered since this snapshot was recorded
            logger.warning(
                "Cannot restore %d-%d for match %s: both teams reach %d",
                snapshot[0],
                snapshot[1],
                self.match.id,
                self.settings.winning_score,
            )
            return False
        return True

    def _restore(self, snapshot: ScoreSnapshot) -> bool:
        self.match.team1.score, self.match.team2.score = snapshot
        return True

    def undo(self) -> bool:
        """Restore the previous score snapshot.

        Refused when the snapshot has both teams at or above the current
        winning score.
        """
        if not self.is_active or not self._can_restore(self.history.peek_undo()):
            return False
        return self._restore(self.history.undo())

    def redo(self) -> bool:
        """Re-apply the next score snapshot after an undo."""
        if not self.is_active or not self._can_restore(self.history.peek_redo()):
            return False
        return self._restore(self.history.redo())

    def finish(self) -> Optional[Match]:
        """Complete the match if exactly one team reached the winning score.

        Returns:
            The completed match, or None if the match cannot finish yet
        """
        winner = self.winner
        if not self.is_active or winner is None:
            logger.warning(
                "Match %s cannot finish at %d-%d (winning score %d)",
                self.match.id,
                self.match.team1.score,
                self.match.team2.score,
                self.settings.winning_score,
            )
            return None
        self.match.winner = winner
        self.match.status = STATUS_COMPLETED
        self.match.timestamp = now_ms()
        self.history = None
        logger.info(
            "Match %s completed %d-%d, %s wins",
            self.match.id,
            self.match.team1.score,
            self.match.team2.score,
            winner,
        )
        return self.match

    def discard(self) -> bool:
        """Cancel a scheduled or active match; it leaves no trace."""
        if self.discarded or self.match.status == STATUS_COMPLETED:
            logger.warning(
                "Cannot discard match %s in state %s", self.match.id, self.match.status
            )
            return False
        self.discarded = True
        self.history = None
        logger.info("Match %s discarded", self.match.id)
        return True
