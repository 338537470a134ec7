# models.py
# Data contracts for the GOAP planner.
# No business logic lives here — pure schema and validation.

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Belief(BaseModel):
    """An opaque world-state condition. Identity is its name."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Unique belief identifier.")

    def __str__(self) -> str:
        return self.name


class Action(BaseModel):
    """A cost-bearing operation with preconditions and effects."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    cost: float = Field(default=1.0, ge=0, description="Non-negative planning cost.")
    preconditions: frozenset[Belief] = Field(default_factory=frozenset)
    effects: frozenset[Belief] = Field(default_factory=frozenset)


class Goal(BaseModel):
    """A prioritized set of desired beliefs."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    desired_effects: frozenset[Belief] = Field(default_factory=frozenset)
    priority: float = Field(default=1.0)


class Plan(BaseModel):
    """Ordered action sequence chosen for one goal. Actions are in execution order."""

    model_config = ConfigDict(frozen=True)

    goal: Goal
    actions: tuple[Action, ...]
    total_cost: float

    @property
    def action_names(self) -> list[str]:
        return [action.name for action in self.actions]


class AttemptStatus(str, Enum):
    PLANNED = "planned"
    SEARCH_FAILED = "search_failed"
    DEAD_LEAF = "dead_leaf"


class GoalAttempt(BaseModel):
    """One goal tried during a planning call and how it ended."""

    goal: Goal
    status: AttemptStatus


class NoPlanReason(str, Enum):
    NO_CANDIDATE_GOALS = "no_candidate_goals"
    ALL_GOALS_FAILED = "all_goals_failed"


class PlanningOutcome(BaseModel):
    """
    Result of a planning call. Exactly one of `plan` and `reason` is set.

    Callers check `found` rather than catching an exception.
    """

    plan: Plan | None = None
    attempts: list[GoalAttempt] = Field(default_factory=list)
    reason: NoPlanReason | None = None

    @property
    def found(self) -> bool:
        return self.plan is not None

    @property
    def message(self) -> str:
        if self.plan is not None:
            return (
                f"Plan for '{self.plan.goal.name}': "
                f"{len(self.plan.actions)} action(s), cost {self.plan.total_cost:g}."
            )
        if self.reason is NoPlanReason.NO_CANDIDATE_GOALS:
            return "No plan found: every goal is already satisfied or has no desired effects."
        tried = ", ".join(f"{a.goal.name} ({a.status.value})" for a in self.attempts)
        return f"No plan found. Goals tried: {tried or 'none'}."
