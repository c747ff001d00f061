"""
Struct dependency resolution and canonical type signatures (EIP-712 encodeType).
"""

from __future__ import annotations

import logging

from ..errors import DependencyCycleError

logger = logging.getLogger(__name__)

_IN_PROGRESS = 1
_DONE = 2


def dependency_graph(registry, root: str) -> dict[str, list[str]]:
    """
    Adjacency mapping of every struct type reachable from ``root``.

    Each type maps to the distinct struct names its fields reference (through
    arrays too), in field order. Traversal is an explicit-stack DFS with
    in-progress marking, so a cycle raises DependencyCycleError instead of
    recursing forever. Undeclared names raise UnknownTypeError.
    """
    registry.fields(root)
    graph: dict[str, list[str]] = {}
    state: dict[str, int] = {}
    path: list[str] = []
    stack: list[tuple[str, list[str], int]] = []

    def enter(name: str) -> None:
        deps: list[str] = []
        for _, field_type in registry.fields(name):
            dep = field_type.struct_name()
            if dep is not None and dep not in deps:
                deps.append(dep)
        graph[name] = deps
        state[name] = _IN_PROGRESS
        path.append(name)
        stack.append((name, deps, 0))

    enter(root)
    while stack:
        name, deps, i = stack.pop()
        if i == len(deps):
            state[name] = _DONE
            path.pop()
            continue
        stack.append((name, deps, i + 1))
        dep = deps[i]
        mark = state.get(dep)
        if mark == _IN_PROGRESS:
            raise DependencyCycleError(path[path.index(dep) :] + [dep])
        if mark is None:
            registry.fields(dep, referenced_by=name)
            enter(dep)
    return graph


def _encode_struct(registry, name: str) -> str:
    fields = ",".join(f"{t.render()} {n}" for n, t in registry.fields(name))
    return f"{name}({fields})"


def canonical_signature(registry, root: str) -> str:
    """
    Canonical type signature: the root's own definition first, then every other
    reachable struct definition sorted by name.

    >>> canonical_signature(registry, "Mail")  # doctest: +SKIP
    'Mail(Person from,Person to,string contents)Person(string name,address wallet)'
    """
    deps = sorted(set(dependency_graph(registry, root)) - {root})
    sig = "".join(_encode_struct(registry, name) for name in [root, *deps])
    logger.debug("Resolved %s -> %s", root, sig)
    return sig


__all__: tuple[str, ...] = ("canonical_signature", "dependency_graph")
