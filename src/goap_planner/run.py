# run.py
# Entry point. Config and wiring only — no logic lives here.
#
# A small survival agent: it is hungry, has no food, and would also like to
# explore. Set GOAP_RECENCY_PENALTY in .env to change tie-break damping.

from goap_planner import display
from goap_planner.config import PlannerConfig
from goap_planner.models import Action, Belief, Goal
from goap_planner.planner import Planner
from goap_planner.world import StaticWorldState

FED = Belief(name="Fed")
HAS_FOOD = Belief(name="HasFood")
AT_FOREST = Belief(name="AtForest")
RESTED = Belief(name="Rested")
EXPLORED = Belief(name="Explored")

ACTIONS = [
    Action(name="EatMeal", cost=1, preconditions={HAS_FOOD}, effects={FED}),
    Action(name="GatherFood", cost=2, preconditions={AT_FOREST}, effects={HAS_FOOD}),
    Action(name="BuyFood", cost=6, effects={HAS_FOOD}),
    Action(name="WalkToForest", cost=1, effects={AT_FOREST}),
    Action(name="Sleep", cost=3, effects={RESTED}),
    Action(name="Wander", cost=2, preconditions={RESTED}, effects={EXPLORED}),
]

GOALS = [
    Goal(name="Survive", desired_effects={FED}, priority=10),
    Goal(name="Explore", desired_effects={EXPLORED}, priority=5),
    Goal(name="Rest", desired_effects={RESTED}, priority=5),
]

FACTS = {
    "Fed": False,
    "HasFood": False,
    "AtForest": False,
    "Rested": False,
    "Explored": False,
}


def main() -> None:
    planner = Planner(PlannerConfig.from_env())
    world = StaticWorldState(FACTS)
    display.banner(len(GOALS), len(ACTIONS))

    display.planning_start("FIRST PLAN")
    first = planner.plan(GOALS, ACTIONS, world)
    display.outcome(first)
    if first.plan is not None:
        _, _, tree = planner.plan_for_goal(first.plan.goal, ACTIONS, world)
        display.search_tree(tree)

    # Pretend the agent ate; the next call should move on to a tied goal.
    display.planning_start("AFTER EATING")
    fed_world = StaticWorldState({**FACTS, "Fed": True})
    second = planner.plan(
        GOALS,
        ACTIONS,
        fed_world,
        most_recent_goal=first.plan.goal if first.plan else None,
    )
    display.outcome(second)


if __name__ == "__main__":
    main()
