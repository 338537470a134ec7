import pytest

from goap_planner.models import Action, Belief, Goal
from goap_planner.world import StaticWorldState

FED = Belief(name="Fed")
HAS_FOOD = Belief(name="HasFood")


@pytest.fixture
def eat_meal():
    return Action(name="EatMeal", cost=1, preconditions={HAS_FOOD}, effects={FED})


@pytest.fixture
def gather_food():
    return Action(name="GatherFood", cost=2, effects={HAS_FOOD})


@pytest.fixture
def fed_goal():
    return Goal(name="Fed", desired_effects={FED}, priority=10)


@pytest.fixture
def hungry_world():
    return StaticWorldState({"Fed": False, "HasFood": False})
