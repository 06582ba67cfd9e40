"""Reward badges: derived achievements, never persisted as entities.

Only badge *titles* are persisted (earned / displayed title sets); the
badges themselves are recomputed from the flight log on demand.
"""

from pydantic import ConfigDict, Field

from avgeek.contracts.common import StoreModel


class RewardBadge(StoreModel):
    """A named milestone and whether the user's history satisfies it.

    ``title`` is the logical key: it identifies the badge definition for
    the lifetime of the app and is what the tracking sets store.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    icon: str = Field(..., description="Icon / category hint for the presentation layer")
    achieved: bool
    detail: str = Field(..., description="Progress or achievement text")


class BadgeUnlock(StoreModel):
    """A badge handed to the presentation layer by the pending queue.

    ``is_major`` is set on the first badge of an unlock batch only
    (eligible for celebratory treatment).  ``has_more`` tells the caller
    whether another badge is waiting behind this one.
    """

    badge: RewardBadge
    is_major: bool = False
    has_more: bool = False
