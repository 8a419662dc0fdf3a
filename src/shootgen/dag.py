# dag.py
from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, List, Set, Tuple

from .errors import DAGError
from .model import DAGStep


def build_dag(
    steps: List[DAGStep],
    external: Iterable[str] = (),
) -> Tuple[Dict[str, Set[str]], Dict[str, int]]:
    """
    Build a DAG from DAGStep objects.

    Requires:
      - step.name: str (unique)
      - step.depends_on: names of steps that must run BEFORE this step,
        either in `steps` or listed in `external` (upstream steps owned by
        the caller, which take no part in the returned graph)
    """
    names = [s.name for s in steps]
    if len(set(names)) != len(names):
        dupes = sorted({n for n in names if names.count(n) > 1})
        raise DAGError(f"Duplicate step names found: {dupes}", duplicates=dupes)

    name_set = set(names)
    external_set = set(external)
    adj: Dict[str, Set[str]] = {n: set() for n in name_set}
    indeg: Dict[str, int] = {n: 0 for n in name_set}

    for step in steps:
        for dep in step.depends_on:
            if dep in external_set and dep not in name_set:
                continue
            if dep not in name_set:
                raise DAGError(
                    f"Step '{step.name}' depends on missing step '{dep}'",
                    known=sorted(name_set | external_set),
                )
            # Edge dep -> step.name (dep must run before step)
            if step.name not in adj[dep]:
                adj[dep].add(step.name)
                indeg[step.name] += 1

    return adj, indeg


def topo_levels(adj: Dict[str, Set[str]], indeg: Dict[str, int]) -> List[List[str]]:
    """
    Convert DAG into topological "levels" (stages).
    Steps within one stage have no dependency on each other.
    """
    indeg = dict(indeg)  # copy (we mutate it)
    q = deque(sorted(n for n, d in indeg.items() if d == 0))

    levels: List[List[str]] = []
    processed = 0

    while q:
        level: List[str] = []

        for _ in range(len(q)):
            node = q.popleft()
            level.append(node)
            processed += 1

        for node in level:
            for child in sorted(adj.get(node, set())):
                indeg[child] -= 1
                if indeg[child] == 0:
                    q.append(child)

        levels.append(sorted(level))

    if processed != len(indeg):
        remaining = sorted(n for n, d in indeg.items() if d > 0)
        raise DAGError(f"DAG has a cycle. Stuck steps: {remaining}", stuck=remaining)

    return levels


def plan(steps: List[DAGStep], external: Iterable[str] = ()) -> List[List[str]]:
    adj, indeg = build_dag(steps, external=external)
    return topo_levels(adj, indeg)
