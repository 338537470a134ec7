# world.py
# World-state oracles. The planner only ever asks one question of the world:
# "is this belief true right now?" Everything else is the caller's business.
#
# Oracles must not mutate world state while answering.

from typing import Callable, Iterable, Mapping, Protocol

from goap_planner.models import Belief


class UnknownBeliefError(Exception):
    """Raised when a strict world state has no fact or sensor for a belief."""


class WorldState(Protocol):
    def evaluate(self, belief: Belief) -> bool: ...


class StaticWorldState:
    """
    Snapshot of facts keyed by belief name.

    Unknown beliefs raise UnknownBeliefError unless strict=False, in which
    case they evaluate false.
    """

    def __init__(self, facts: Mapping[str, bool], strict: bool = True) -> None:
        self._facts = dict(facts)
        self._strict = strict

    def evaluate(self, belief: Belief) -> bool:
        if belief.name not in self._facts:
            if self._strict:
                raise UnknownBeliefError(f"No fact registered for belief '{belief.name}'.")
            return False
        return bool(self._facts[belief.name])

    @property
    def facts(self) -> dict[str, bool]:
        """Shallow copy of the fact table."""
        return dict(self._facts)


class SensorWorldState:
    """Live world state: one zero-argument predicate per belief name."""

    def __init__(self, sensors: Mapping[str, Callable[[], bool]]) -> None:
        self._sensors = dict(sensors)

    def evaluate(self, belief: Belief) -> bool:
        sensor = self._sensors.get(belief.name)
        if sensor is None:
            raise UnknownBeliefError(f"No sensor registered for belief '{belief.name}'.")
        return bool(sensor())


def unsatisfied(beliefs: Iterable[Belief], world: WorldState) -> frozenset[Belief]:
    """Beliefs that currently evaluate false."""
    return frozenset(b for b in beliefs if not world.evaluate(b))
