# display.py
# All terminal output for the GOAP planner.
#
# This module owns presentation entirely. The planner never formats strings —
# callers hand its results to named functions here.
#
# Colour language:
#   cyan    — goal selection / routing
#   yellow  — search tree
#   green   — plan found
#   red     — no plan / failed attempts
#   magenta — dead-leaf goals

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from goap_planner.models import AttemptStatus, Plan, PlanningOutcome
from goap_planner.search import SearchTree

console = Console()

_STATUS_STYLE = {
    AttemptStatus.PLANNED: "bold green",
    AttemptStatus.SEARCH_FAILED: "bold red",
    AttemptStatus.DEAD_LEAF: "bold magenta",
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _label(tag: str, color: str) -> Text:
    t = Text()
    t.append(f" {tag} ", style=f"bold white on {color}")
    return t


def _beliefs(beliefs) -> str:
    return ", ".join(sorted(b.name for b in beliefs)) or "∅"


# ---------------------------------------------------------------------------
# Banner
# ---------------------------------------------------------------------------


def banner(goal_count: int, action_count: int) -> None:
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]GOAP Planner[/bold cyan]\n"
            "[dim]Backward-chaining search, cheapest branch first[/dim]\n\n"
            f"[dim]Goals   :[/dim] [white]{goal_count}[/white]\n"
            f"[dim]Actions :[/dim] [white]{action_count}[/white]",
            border_style="cyan",
            padding=(1, 4),
        )
    )


def planning_start(title: str) -> None:
    console.print()
    console.print(Rule(f"[cyan]{title}[/cyan]", style="cyan"))


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


def plan_found(plan: Plan) -> None:
    console.print()
    table = Table(
        box=box.SIMPLE_HEAVY,
        border_style="green",
        show_header=True,
        header_style="bold green",
        padding=(0, 1),
    )
    table.add_column("#", justify="center", width=4)
    table.add_column("Action", style="bold white")
    table.add_column("Cost", justify="right", width=8)
    table.add_column("Cumulative", justify="right", width=11)
    table.add_column("Effects", style="dim white")

    running = 0.0
    for index, action in enumerate(plan.actions, start=1):
        running += action.cost
        table.add_row(
            str(index),
            action.name,
            f"{action.cost:g}",
            f"{running:g}",
            _beliefs(action.effects),
        )

    console.print(
        Panel(
            table,
            title=_label(f"PLAN: {plan.goal.name}", "green"),
            subtitle=f"[dim]Total cost: {plan.total_cost:g}[/dim]",
            border_style="green",
            padding=(0, 1),
        )
    )


def no_plan(outcome: PlanningOutcome) -> None:
    console.print()
    console.print(
        Panel(
            f"[bold white]{outcome.message}[/bold white]",
            title=_label("NO PLAN", "red"),
            border_style="red",
            padding=(0, 2),
        )
    )


def attempts(outcome: PlanningOutcome) -> None:
    if not outcome.attempts:
        return
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold cyan", padding=(0, 1))
    table.add_column("Goal", style="white")
    table.add_column("Priority", justify="right", width=9)
    table.add_column("Status")

    for attempt in outcome.attempts:
        style = _STATUS_STYLE[attempt.status]
        table.add_row(
            attempt.goal.name,
            f"{attempt.goal.priority:g}",
            f"[{style}]{attempt.status.value}[/{style}]",
        )
    console.print(table)


def outcome(result: PlanningOutcome) -> None:
    attempts(result)
    if result.plan is not None:
        plan_found(result.plan)
    else:
        no_plan(result)


# ---------------------------------------------------------------------------
# Search tree
# ---------------------------------------------------------------------------


def search_tree(tree: SearchTree, root: int = 0) -> None:
    node = tree.node(root)
    graph = Tree(f"[bold yellow]Goal[/bold yellow] [dim]requires {_beliefs(node.required)}[/dim]")

    stack = [(root, graph)]
    while stack:
        index, branch = stack.pop()
        for child_index in tree.node(index).leaves:
            child = tree.node(child_index)
            sub = branch.add(
                f"[bold white]{child.action.name}[/bold white] "
                f"[yellow]cost={child.cost:g}[/yellow] "
                f"[dim]requires {_beliefs(child.required)}[/dim]"
            )
            stack.append((child_index, sub))

    console.print()
    console.print(graph)
