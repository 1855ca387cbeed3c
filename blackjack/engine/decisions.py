"""
Hit/stand decision providers for human-controlled players.

A decision provider is any callable taking the Player being asked and
returning True to hit. The round engine never reads the console directly;
the default provider does, and tests or the simulator substitute their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable

if TYPE_CHECKING:
    from .participants import Player

# decide(player) -> True to take another card
HitDecision = Callable[["Player"], bool]


def is_yes(answer: str) -> bool:
    """True when a response starts with 'y' or 'Y' (leading whitespace ignored).

    Examples:
        >>> is_yes('y'), is_yes(' Yes'), is_yes('n'), is_yes('')
        (True, True, False, False)
    """
    return answer.strip()[:1] in ('y', 'Y')


def console_hit_decision(player: Player) -> bool:
    """Ask on the console whether the player wants a hit.

    Blocks until a line is entered. Anything other than a y/Y-prefixed
    answer, including end of input, means stand.
    """
    try:
        answer = input(f"\n{player.name}, do you want a hit? (y/n): ")
    except EOFError:
        return False
    return is_yes(answer)


def make_threshold_decision(stand_on: int = 17) -> HitDecision:
    """Return a provider that hits while the player's total is below stand_on.

    Args:
        stand_on: Lowest total the player stands on.
    """

    def _decide(player: Player) -> bool:
        return player.total() < stand_on

    return _decide


class ScriptedDecisions:
    """Replay a fixed sequence of answers, then stand.

    Answers may be booleans or console-style strings ('y', 'n', 'Yes', ...).
    ``calls`` records the name of each player asked, in order.
    """

    def __init__(self, answers: Iterable[bool | str] = ()) -> None:
        self._answers = [a if isinstance(a, bool) else is_yes(a) for a in answers]
        self.calls: list[str] = []

    def __call__(self, player: Player) -> bool:
        self.calls.append(player.name)
        if not self._answers:
            return False
        return self._answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._answers)
