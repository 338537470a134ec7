# search.py
# Backward-chaining search over action effects.
#
# The search tree lives in an arena: nodes are addressed by index and refer
# to their parent and children by index. Each node owns an immutable snapshot
# of the beliefs still required at that point, so no working set is shared
# between recursive calls.
#
# An action chosen on a branch is removed from the candidates passed down
# that branch, so no action repeats on a root-to-leaf path. Sibling branches
# still see it.

from dataclasses import dataclass, field
from typing import Iterable

from goap_planner.models import Action, Belief
from goap_planner.world import WorldState


# ---------------------------------------------------------------------------
# Tree model
# ---------------------------------------------------------------------------


@dataclass
class SearchNode:
    parent: int | None
    action: Action | None
    required: frozenset[Belief]
    cost: float
    leaves: list[int] = field(default_factory=list)

    @property
    def is_dead_leaf(self) -> bool:
        """No children and no action: nothing was needed to reach this node."""
        return not self.leaves and self.action is None


class SearchTree:
    """Arena of SearchNodes. Index 0 is the root once `add_root` is called."""

    def __init__(self) -> None:
        self._nodes: list[SearchNode] = []

    def add_root(self, required: Iterable[Belief]) -> int:
        if self._nodes:
            raise ValueError("Search tree already has a root.")
        self._nodes.append(SearchNode(None, None, frozenset(required), 0.0))
        return 0

    def add_child(self, parent: int, action: Action, required: Iterable[Belief]) -> int:
        """Allocate a node below `parent`. It is not a leaf of `parent` until attached."""
        cost = self._nodes[parent].cost + action.cost
        self._nodes.append(SearchNode(parent, action, frozenset(required), cost))
        return len(self._nodes) - 1

    def attach(self, parent: int, child: int) -> None:
        self._nodes[parent].leaves.append(child)

    def discard_from(self, mark: int) -> None:
        """Drop every node allocated at or after `mark` (a failed subtree)."""
        del self._nodes[mark:]

    def node(self, index: int) -> SearchNode:
        return self._nodes[index]

    def children(self, index: int) -> list[SearchNode]:
        return [self._nodes[i] for i in self._nodes[index].leaves]

    def path_to(self, index: int) -> list[Action]:
        """Actions chosen from the root down to `index`, root side first."""
        actions: list[Action] = []
        current: int | None = index
        while current is not None:
            node = self._nodes[current]
            if node.action is not None:
                actions.append(node.action)
            current = node.parent
        actions.reverse()
        return actions

    def __len__(self) -> int:
        return len(self._nodes)


# ---------------------------------------------------------------------------
# PathFinder
# ---------------------------------------------------------------------------


def _by_cost(actions: Iterable[Action]) -> list[Action]:
    """Cheapest first; equal costs keep caller order."""
    return sorted(actions, key=lambda action: action.cost)


class PathFinder:
    """
    Builds the search tree below a node by chaining backwards from the
    beliefs it still requires.

    A node succeeds as soon as one action covers all of its outstanding
    beliefs (after its own preconditions are explained below it). Actions
    that only explain part of the node still become leaves; the node then
    succeeds once every candidate has been tried, provided at least one
    branch was attached.

    `search` returns False when no branch can be completed. Failure is a
    plain value, never an exception.
    """

    def __init__(self, world: WorldState) -> None:
        self._world = world

    def search(self, tree: SearchTree, index: int, actions: Iterable[Action]) -> bool:
        node = tree.node(index)

        # Beliefs the world already satisfies need no action.
        outstanding = frozenset(b for b in node.required if not self._world.evaluate(b))
        node.required = outstanding
        if not outstanding:
            return True

        candidates = _by_cost(actions)
        for action in candidates:
            if not action.effects & outstanding:
                continue

            child_required = (outstanding - action.effects) | action.preconditions
            remaining = [a for a in candidates if a != action]

            mark = len(tree)
            child = tree.add_child(index, action, child_required)
            if self.search(tree, child, remaining):
                tree.attach(index, child)
                # The branch already accounts for this action's preconditions.
                child_required = child_required - action.preconditions
            else:
                tree.discard_from(mark)

            if not child_required:
                return True

        # Each attached branch explains everything this node required.
        return bool(node.leaves)
