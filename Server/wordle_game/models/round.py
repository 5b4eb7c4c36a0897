"""
Round Data Models

Contains the mutable round value object and the enums describing
letter feedback, round status and rejected submissions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterJudgment(Enum):
    """Feedback for one letter position of a submitted guess."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def priority(self) -> int:
        return _JUDGMENT_PRIORITY[self]


_JUDGMENT_PRIORITY = {
    LetterJudgment.ABSENT: 0,
    LetterJudgment.PRESENT: 1,
    LetterJudgment.CORRECT: 2,
}


class RoundStatus(Enum):
    """Round lifecycle. WON and LOST are terminal."""
    ONGOING = "ongoing"
    WON = "won"
    LOST = "lost"


class RejectReason(Enum):
    """Why a submission was refused. None of these change the round."""
    INCOMPLETE_GUESS = "incomplete_guess"
    UNKNOWN_WORD = "unknown_word"
    ROUND_OVER = "round_over"


@dataclass(frozen=True)
class JudgedGuess:
    """A submitted word together with its per-letter feedback."""
    word: str
    judgments: Tuple[LetterJudgment, ...]

    def pairs(self) -> List[Tuple[str, str]]:
        return [(letter, judgment.value) for letter, judgment in zip(self.word, self.judgments)]


@dataclass
class Round:
    """
    A single game session.

    ``key_states`` is derived from ``guesses``; it is kept up to date
    incrementally and can always be rebuilt with
    ``round_engine.aggregate_key_states``.
    """
    secret: str
    guesses: List[JudgedGuess] = field(default_factory=list)
    staged: List[str] = field(default_factory=list)
    status: RoundStatus = RoundStatus.ONGOING
    key_states: Dict[str, LetterJudgment] = field(default_factory=dict)

    @property
    def attempts(self) -> int:
        return len(self.guesses)

    @property
    def is_over(self) -> bool:
        return self.status is not RoundStatus.ONGOING

    @property
    def staged_word(self) -> str:
        return ''.join(self.staged)


@dataclass(frozen=True)
class SubmitResult:
    """
    Outcome of a submission.

    ``guess_count`` is set only when the round was won, ``secret_if_lost``
    only when it was lost.
    """
    accepted: bool
    status: RoundStatus
    reason: Optional[RejectReason] = None
    judgments: Tuple[LetterJudgment, ...] = ()
    guess_count: Optional[int] = None
    secret_if_lost: Optional[str] = None
