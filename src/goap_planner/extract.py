# extract.py
# Linearize a search tree into a single plan.
#
# The walk is greedy: at each level it takes the cheapest leaf and never
# revisits siblings, so total_cost is the cost of the chosen chain, not a
# minimum over the whole tree.

from goap_planner.models import Goal, Plan
from goap_planner.search import SearchTree


def extract_plan(tree: SearchTree, goal: Goal, root: int = 0) -> Plan | None:
    """
    Walk cheapest-first from `root` and return the plan, or None when the
    root is a dead leaf (the goal needed no action).
    """
    node = tree.node(root)
    if node.is_dead_leaf:
        return None

    recorded = []
    while node.leaves:
        # min() keeps the first leaf on equal cost.
        node = tree.node(min(node.leaves, key=lambda i: tree.node(i).cost))
        recorded.append(node.action)

    # Recorded goal-side first; preconditions must be established first.
    recorded.reverse()
    return Plan(goal=goal, actions=tuple(recorded), total_cost=node.cost)
