import pytest
from unittest.mock import MagicMock

from goap_planner.models import Belief
from goap_planner.world import (
    SensorWorldState,
    StaticWorldState,
    UnknownBeliefError,
    unsatisfied,
)

A = Belief(name="A")
B = Belief(name="B")


def test_static_world_reads_facts():
    world = StaticWorldState({"A": True, "B": 0})
    assert world.evaluate(A) is True
    assert world.evaluate(B) is False


def test_static_world_strict_unknown_belief():
    with pytest.raises(UnknownBeliefError, match="'A'"):
        StaticWorldState({}).evaluate(A)


def test_static_world_lenient_unknown_belief():
    assert StaticWorldState({}, strict=False).evaluate(A) is False


def test_static_world_copies_facts():
    facts = {"A": False}
    world = StaticWorldState(facts)
    facts["A"] = True
    assert world.evaluate(A) is False
    assert world.facts == {"A": False}


def test_sensor_world_calls_sensor_each_time():
    sensor = MagicMock(side_effect=[False, True])
    world = SensorWorldState({"A": sensor})

    assert world.evaluate(A) is False
    assert world.evaluate(A) is True
    assert sensor.call_count == 2


def test_sensor_world_unknown_belief():
    with pytest.raises(UnknownBeliefError, match="sensor"):
        SensorWorldState({"A": lambda: True}).evaluate(B)


def test_unsatisfied_filters_true_beliefs():
    world = StaticWorldState({"A": True, "B": False})
    assert unsatisfied([A, B], world) == frozenset({B})
