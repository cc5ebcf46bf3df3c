"""Transform registry — every pipeline stage is a plain function registered via decorator.

Usage:
    @transform(id="T1.02", layer=Layer.NORMALIZATION, option="split_chains", dependencies=["T1.01"])
    def split_chains(commands: list[Command], options: PathOptions) -> list[Command]:
        ...

A stage takes the command sequence produced by the previous stage and returns
a new one. It never mutates its input. Adding a stage = creating one module in
``pathcommand.engine.stages`` with the decorator. Nothing else changes.
"""

from __future__ import annotations

import enum
import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from pathcommand.engine.commands import Command
    from pathcommand.engine.config import PathOptions

logger = logging.getLogger(__name__)

StageFn = Callable[["list[Command]", "PathOptions"], "list[Command]"]

STAGES_PACKAGE = "pathcommand.engine.stages"


class Layer(enum.IntEnum):
    NORMALIZATION = 1
    CURVES = 2


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: StageFn
    # PathOptions flag that switches the stage on; None = always runs
    option: str | None = None
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    """Registry of pipeline stages."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def resolve_order(self) -> list[TransformSpec]:
        """Topological sort of every registered stage, respecting dependencies."""
        pool = self._transforms

        # Kahn's algorithm
        in_degree: dict[str, int] = {tid: 0 for tid in pool}
        for tid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in pool:
                    in_degree[tid] += 1

        queue = sorted([tid for tid, d in in_degree.items() if d == 0])
        ordered: list[TransformSpec] = []

        while queue:
            tid = queue.pop(0)
            ordered.append(pool[tid])
            for other_id, other_spec in pool.items():
                if tid in other_spec.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)
                        queue.sort()

        if len(ordered) != len(pool):
            missing = set(pool.keys()) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._transforms)


# Module-level singleton
_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    option: str | None = None,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a stage function."""

    def decorator(fn: StageFn):
        spec = TransformSpec(
            id=id,
            layer=layer,
            fn=fn,
            option=option,
            dependencies=dependencies or [],
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator


def register_transforms() -> None:
    """Import all stage modules so @transform decorators fire."""
    package = importlib.import_module(STAGES_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{STAGES_PACKAGE}.{module_name}")
