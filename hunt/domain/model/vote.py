"""Vote entity and the vote ledger transition.

Each user holds at most one vote per post. Casting a vote is a request to
hold that kind of vote: repeating the kind you already hold withdraws it,
casting the other kind flips it.
"""

from enum import Enum
from typing import Mapping

from hunt.domain.model.common import DomainModel
from hunt.domain.value import UserId, VoteType


class Vote(DomainModel):
    """A single voter's directional opinion on a post."""

    user_id: UserId
    type: VoteType


class VoteAction(str, Enum):
    """What a cast did to the voter's entry in the ledger."""

    INSERTED = "inserted"
    REMOVED = "removed"
    FLIPPED = "flipped"


class VoteOutcome(DomainModel):
    """Result of applying one cast to a post's vote ledger."""

    votes: dict[UserId, Vote]
    vote_count: int
    action: VoteAction
    delta: int


def apply_vote(
    votes: Mapping[UserId, Vote],
    vote_count: int,
    voter_id: UserId,
    requested: VoteType,
) -> VoteOutcome:
    """Apply a cast to a vote ledger.

    | existing | requested | action   | delta |
    |----------|-----------|----------|-------|
    | none     | up        | insert   | +1    |
    | none     | down      | insert   | -1    |
    | up       | up        | remove   | -1    |
    | up       | down      | flip     | -2    |
    | down     | down      | remove   | +1    |
    | down     | up        | flip     | +2    |

    The input mapping is never mutated. A flipped vote keeps its position
    in the ledger's ordering; a new vote is appended.

    Args:
        votes: Current votes keyed by voter
        vote_count: Current cached aggregate
        voter_id: Who is voting
        requested: The vote kind being cast

    Returns:
        The new ledger, aggregate, action taken and aggregate delta
    """
    updated = dict(votes)
    existing = updated.get(voter_id)

    if existing is None:
        updated[voter_id] = Vote(user_id=voter_id, type=requested)
        action = VoteAction.INSERTED
        delta = requested.weight
    elif existing.type == requested:
        del updated[voter_id]
        action = VoteAction.REMOVED
        delta = -requested.weight
    else:
        updated[voter_id] = Vote(user_id=voter_id, type=requested)
        action = VoteAction.FLIPPED
        delta = 2 * requested.weight

    return VoteOutcome(
        votes=updated,
        vote_count=vote_count + delta,
        action=action,
        delta=delta,
    )


def tally(votes: Mapping[UserId, Vote]) -> int:
    """Aggregate a ledger from scratch: upvotes minus downvotes."""
    return sum(vote.type.weight for vote in votes.values())
