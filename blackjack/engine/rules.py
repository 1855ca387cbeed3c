"""
Settlement of a finished round, from the player's perspective.

Settlement order:
    1. Player bust   → BUST (already announced during the player's turn;
                       no win/lose/push notice follows)
    2. House bust    → WIN for every remaining player
    3. Total compare → strictly greater WIN, strictly less LOSS, equal PUSH
"""

from __future__ import annotations

from enum import Enum, auto


class Outcome(Enum):
    WIN = auto()
    LOSS = auto()
    PUSH = auto()
    BUST = auto()


# Net result per outcome: +1 win, -1 loss or bust, 0 push. No wagering; used
# only to summarise autoplay runs.
OUTCOME_SCORES: dict[Outcome, int] = {
    Outcome.WIN: 1,
    Outcome.LOSS: -1,
    Outcome.PUSH: 0,
    Outcome.BUST: -1,
}


def settle_player(player_total: int, house_total: int, house_busted: bool) -> Outcome:
    """Settle a player who did NOT bust against the House.

    Args:
        player_total: Player's final total (<= 21).
        house_total: House's final total.
        house_busted: True if the House's final total exceeds 21.

    Examples:
        >>> settle_player(18, 25, house_busted=True)
        <Outcome.WIN: 1>
        >>> settle_player(18, 19, house_busted=False)
        <Outcome.LOSS: 2>
        >>> settle_player(19, 19, house_busted=False)
        <Outcome.PUSH: 3>
    """
    if house_busted:
        return Outcome.WIN
    if player_total > house_total:
        return Outcome.WIN
    if player_total < house_total:
        return Outcome.LOSS
    return Outcome.PUSH
