# planner.py
# GOAP planning orchestration.
#
# The Planner owns the per-call control flow. It reads world state through
# the caller's oracle and returns a PlanningOutcome; it never prints, logs,
# or executes anything.
#
# Control flow:
#   order_goals → per goal: SearchTree root → PathFinder.search
#   → dead-leaf check → extract_plan → PlanningOutcome
#
# All terminal output is delegated to display.py — no formatting here.

from typing import Iterable

from goap_planner.config import PlannerConfig
from goap_planner.extract import extract_plan
from goap_planner.models import (
    Action,
    AttemptStatus,
    Belief,
    Goal,
    GoalAttempt,
    NoPlanReason,
    Plan,
    PlanningOutcome,
)
from goap_planner.search import PathFinder, SearchTree
from goap_planner.selector import order_goals
from goap_planner.world import WorldState


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class DuplicateActionError(Exception):
    """Raised when two different actions share a name in one planning call."""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _unique_actions(actions: Iterable[Action]) -> list[Action]:
    """Drop exact repeats, keep first-seen order, reject name clashes."""
    seen: dict[str, Action] = {}
    for action in actions:
        existing = seen.get(action.name)
        if existing is None:
            seen[action.name] = action
        elif existing != action:
            raise DuplicateActionError(
                f"Action name '{action.name}' is registered with two different definitions."
            )
    return list(seen.values())


def simulate(plan: Plan, world: WorldState) -> frozenset[Belief] | None:
    """
    Hypothetically run the plan from the current world state.

    Starts from the beliefs relevant to the plan that are true now and adds
    each action's effects in order. Returns the final belief set, or None if
    some action's preconditions would not hold when it is reached.
    """
    relevant: set[Belief] = set(plan.goal.desired_effects)
    for action in plan.actions:
        relevant |= action.preconditions | action.effects

    state = {belief for belief in relevant if world.evaluate(belief)}
    for action in plan.actions:
        if not action.preconditions <= state:
            return None
        state |= action.effects
    return frozenset(state)


def validate_plan(plan: Plan, world: WorldState) -> bool:
    """True if every step is executable in turn and the goal holds at the end."""
    final = simulate(plan, world)
    return final is not None and plan.goal.desired_effects <= final


# ---------------------------------------------------------------------------
# Planner
# ---------------------------------------------------------------------------


class Planner:
    """
    Goal-oriented action planner.

    Example:
        planner = Planner()
        outcome = planner.plan(goals, actions, StaticWorldState(facts))
        if outcome.found:
            run(outcome.plan.actions)
    """

    def __init__(self, config: PlannerConfig | None = None) -> None:
        self._config = config or PlannerConfig()

    @property
    def config(self) -> PlannerConfig:
        return self._config

    def plan_for_goal(
        self,
        goal: Goal,
        actions: Iterable[Action],
        world: WorldState,
    ) -> tuple[AttemptStatus, Plan | None, SearchTree]:
        """
        Search and extract for a single goal.

        Returns the attempt status, the plan (only when PLANNED) and the
        search tree that was built, for inspection.
        """
        tree = SearchTree()
        root = tree.add_root(goal.desired_effects)

        if not PathFinder(world).search(tree, root, _unique_actions(actions)):
            return AttemptStatus.SEARCH_FAILED, None, tree

        plan = extract_plan(tree, goal, root)
        if plan is None:
            return AttemptStatus.DEAD_LEAF, None, tree
        return AttemptStatus.PLANNED, plan, tree

    def plan(
        self,
        goals: Iterable[Goal],
        actions: Iterable[Action],
        world: WorldState,
        most_recent_goal: Goal | None = None,
    ) -> PlanningOutcome:
        """
        Plan for the highest-priority achievable goal.

        Goals are tried in selector order; the first one that yields a
        non-empty plan wins. Returns a PlanningOutcome in all cases — the
        caller checks `found` for the no-plan branch.
        """
        available = _unique_actions(actions)
        ordered = order_goals(
            goals,
            world,
            most_recent=most_recent_goal,
            recency_penalty=self._config.recency_penalty,
        )
        if not ordered:
            return PlanningOutcome(reason=NoPlanReason.NO_CANDIDATE_GOALS)

        attempts: list[GoalAttempt] = []
        for goal in ordered:
            status, plan, _ = self.plan_for_goal(goal, available, world)
            attempts.append(GoalAttempt(goal=goal, status=status))
            if plan is not None:
                return PlanningOutcome(plan=plan, attempts=attempts)

        return PlanningOutcome(attempts=attempts, reason=NoPlanReason.ALL_GOALS_FAILED)
