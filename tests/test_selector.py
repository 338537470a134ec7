from goap_planner.models import Belief, Goal
from goap_planner.selector import order_goals
from goap_planner.world import StaticWorldState

A = Belief(name="A")
B = Belief(name="B")
C = Belief(name="C")

WORLD = StaticWorldState({"A": True, "B": False, "C": False})


def test_satisfied_goals_are_excluded():
    done = Goal(name="Done", desired_effects={A}, priority=100)
    open_goal = Goal(name="Open", desired_effects={B}, priority=1)
    assert order_goals([done, open_goal], WORLD) == [open_goal]


def test_partially_satisfied_goal_is_kept():
    partial = Goal(name="Partial", desired_effects={A, B})
    assert order_goals([partial], WORLD) == [partial]


def test_goal_without_desired_effects_is_excluded():
    empty = Goal(name="Empty", priority=50)
    assert order_goals([empty], WORLD) == []


def test_priority_descending():
    low = Goal(name="Low", desired_effects={B}, priority=1)
    high = Goal(name="High", desired_effects={C}, priority=9)
    mid = Goal(name="Mid", desired_effects={B, C}, priority=5)
    assert order_goals([low, high, mid], WORLD) == [high, mid, low]


def test_recent_goal_loses_tie():
    first = Goal(name="First", desired_effects={B}, priority=5)
    second = Goal(name="Second", desired_effects={C}, priority=5)

    assert order_goals([first, second], WORLD) == [first, second]
    assert order_goals([first, second], WORLD, most_recent=first) == [second, first]
    assert order_goals([first, second], WORLD, most_recent=second) == [first, second]


def test_recency_penalty_does_not_override_real_priority_gap():
    top = Goal(name="Top", desired_effects={B}, priority=10)
    other = Goal(name="Other", desired_effects={C}, priority=9)
    assert order_goals([other, top], WORLD, most_recent=top) == [top, other]


def test_custom_recency_penalty():
    top = Goal(name="Top", desired_effects={B}, priority=10)
    other = Goal(name="Other", desired_effects={C}, priority=9)
    ordered = order_goals([top, other], WORLD, most_recent=top, recency_penalty=2)
    assert ordered == [other, top]
