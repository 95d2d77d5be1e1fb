"""aoc2024.day05
================

Print queue: page-ordering rules ``a|b`` say page ``a`` must be printed before
page ``b``. Valid updates contribute their middle page directly; invalid ones
are repaired by topologically sorting the rule graph restricted to the pages of
the update. A repair is only accepted when the sorted order is a Hamiltonian
path of that subgraph (every consecutive pair is directly ruled), which makes
the order unique. Anything else means the rule set is inconsistent and the run
is aborted.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from .config import SolveConfig
from .errors import InvariantError, ParseError
from .parsing import parse_ints, split_sections
from .types import Answer

Rule = Tuple[int, int]


@dataclass(frozen=True)
class PrintQueue:
    page_ordering_rules: Tuple[Rule, ...]
    updates: Tuple[Tuple[int, ...], ...]


def parse_input(text: str) -> PrintQueue:
    sections = split_sections(text)
    if len(sections) != 2:
        raise ParseError(f"expected rules and updates sections, found {len(sections)} sections")
    rules_text, updates_text = sections
    rules: List[Rule] = []
    for line in rules_text.splitlines():
        pair = parse_ints(line, "|")
        if len(pair) != 2:
            raise ParseError(f"malformed ordering rule {line!r}")
        rules.append((pair[0], pair[1]))
    updates = [tuple(parse_ints(line, ",")) for line in updates_text.splitlines()]
    return PrintQueue(page_ordering_rules=tuple(rules), updates=tuple(updates))


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
def make_disallowed_in_suffix_map(rules: Iterable[Rule]) -> Dict[int, Set[int]]:
    """Map each page to the pages that may not appear after it."""

    disallowed: Dict[int, Set[int]] = defaultdict(set)
    for before, after in rules:
        disallowed[after].add(before)
    return disallowed


def is_valid_update(disallowed_in_suffix: Dict[int, Set[int]], update: Sequence[int]) -> bool:
    seen_disallowed: Set[int] = set()
    for page in update:
        if page in seen_disallowed:
            return False
        seen_disallowed |= disallowed_in_suffix.get(page, set())
    return True


def middle_page_number(update: Sequence[int]) -> int:
    return update[len(update) // 2]


# ---------------------------------------------------------------------------
# Rule graph
# ---------------------------------------------------------------------------
_IN_PROGRESS = 1
_DONE = 2


class Graph:
    """Directed graph over page numbers built from ordering rules."""

    def __init__(self) -> None:
        self.edges: Dict[int, Set[int]] = {}

    @classmethod
    def with_edges(cls, edges: Iterable[Rule]) -> "Graph":
        graph = cls()
        for src, dest in edges:
            graph.add_edge(src, dest)
        return graph

    def add_edge(self, src: int, dest: int) -> None:
        self.edges.setdefault(src, set()).add(dest)
        self.edges.setdefault(dest, set())

    def has_edge(self, src: int, dest: int) -> bool:
        return dest in self.edges.get(src, ())

    def vertices(self) -> Set[int]:
        return set(self.edges)

    def subgraph(self, vertices: Iterable[int]) -> "SubgraphView":
        return SubgraphView(self, self.vertices() & set(vertices))


class SubgraphView:
    """Read-only view of a :class:`Graph` restricted to a vertex subset."""

    def __init__(self, graph: Graph, vertices: Set[int]) -> None:
        self.graph = graph
        self.vertices = vertices

    def _successors(self, vertex: int) -> List[int]:
        return sorted(dest for dest in self.graph.edges.get(vertex, ()) if dest in self.vertices)

    def topologically_sort(self) -> Optional[List[int]]:
        """Depth-first topological order, or ``None`` if the view has a cycle.

        Uses an explicit work stack of ``(vertex, successor iterator)`` frames
        with tri-colour marking: unmarked, in progress (on the stack) and done.
        Reaching an in-progress vertex again means a back edge, i.e. a cycle.
        """

        marks: Dict[int, int] = {}
        order: List[int] = []
        for root in sorted(self.vertices):
            if root in marks:
                continue
            marks[root] = _IN_PROGRESS
            stack = [(root, iter(self._successors(root)))]
            while stack:
                vertex, successors = stack[-1]
                for successor in successors:
                    mark = marks.get(successor)
                    if mark == _IN_PROGRESS:
                        return None
                    if mark is None:
                        marks[successor] = _IN_PROGRESS
                        stack.append((successor, iter(self._successors(successor))))
                        break
                else:
                    stack.pop()
                    marks[vertex] = _DONE
                    order.append(vertex)
        order.reverse()
        return order

    def hamiltonian_path(self) -> Optional[List[int]]:
        order = self.topologically_sort()
        if order is None:
            return None
        if all(self.graph.has_edge(src, dest) for src, dest in zip(order, order[1:])):
            return order
        return None


def fix_update(rules_graph: Graph, update: Sequence[int]) -> Optional[List[int]]:
    return rules_graph.subgraph(update).hamiltonian_path()


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------
def sum_of_middle_pages_of_valid_updates(queue: PrintQueue) -> int:
    disallowed = make_disallowed_in_suffix_map(queue.page_ordering_rules)
    return sum(middle_page_number(update) for update in queue.updates if is_valid_update(disallowed, update))


def sum_of_middle_pages_of_fixed_updates(queue: PrintQueue) -> int:
    """Repair every invalid update and sum the repaired middle pages.

    Raises
    ------
    InvariantError
        If an invalid update cannot be ordered uniquely by the rules.
    """

    disallowed = make_disallowed_in_suffix_map(queue.page_ordering_rules)
    rules_graph = Graph.with_edges(queue.page_ordering_rules)
    total = 0
    for update in queue.updates:
        if is_valid_update(disallowed, update):
            continue
        fixed = fix_update(rules_graph, update)
        if fixed is None or len(fixed) != len(update):
            raise InvariantError(f"page ordering rules cannot repair update {list(update)}")
        total += middle_page_number(fixed)
    return total


def solution(text: str, config: SolveConfig | None = None) -> Answer:
    queue = parse_input(text)
    return Answer(
        part_1=sum_of_middle_pages_of_valid_updates(queue),
        part_2=sum_of_middle_pages_of_fixed_updates(queue),
    )


__all__ = [
    "PrintQueue",
    "parse_input",
    "make_disallowed_in_suffix_map",
    "is_valid_update",
    "middle_page_number",
    "Graph",
    "SubgraphView",
    "fix_update",
    "sum_of_middle_pages_of_valid_updates",
    "sum_of_middle_pages_of_fixed_updates",
    "solution",
]
