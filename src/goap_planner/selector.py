# selector.py
# Goal ordering. Only goals with outstanding work are candidates.

from typing import Iterable

from goap_planner.models import Goal
from goap_planner.world import WorldState

RECENCY_PENALTY = 0.01


def order_goals(
    goals: Iterable[Goal],
    world: WorldState,
    most_recent: Goal | None = None,
    recency_penalty: float = RECENCY_PENALTY,
) -> list[Goal]:
    """
    Return candidate goals, highest priority first.

    A goal is a candidate when at least one desired belief evaluates false.
    The most recently chosen goal competes with its priority lowered by
    `recency_penalty`, so an equal-priority rival wins the tie and the agent
    does not oscillate on one goal. Remaining ties keep input order.
    """
    candidates = [
        goal
        for goal in goals
        if any(not world.evaluate(belief) for belief in goal.desired_effects)
    ]

    def _effective_priority(goal: Goal) -> float:
        if most_recent is not None and goal == most_recent:
            return goal.priority - recency_penalty
        return goal.priority

    return sorted(candidates, key=_effective_priority, reverse=True)
