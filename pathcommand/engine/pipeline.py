"""Pipeline orchestrator — runs the enabled stages in dependency order."""

from __future__ import annotations

import logging
import time

from pathcommand.engine.commands import Command
from pathcommand.engine.config import PathOptions
from pathcommand.engine.registry import TransformRegistry, TransformSpec, get_registry, register_transforms

logger = logging.getLogger(__name__)


class Pipeline:
    """Threads one command sequence through every enabled stage."""

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        options: PathOptions | None = None,
    ) -> None:
        if registry is None:
            register_transforms()
            registry = get_registry()
        self.registry = registry
        self.options = options or PathOptions()

    def stages(self) -> list[TransformSpec]:
        """Stages that will run for the current options, in execution order."""
        return [spec for spec in self.registry.resolve_order() if self.options.enabled(spec.option)]

    def run(self, commands: list[Command]) -> list[Command]:
        start = time.perf_counter()
        ordered = self.stages()

        logger.debug(
            "Pipeline: %d of %d transforms enabled for %d commands",
            len(ordered),
            self.registry.count,
            len(commands),
        )

        for spec in ordered:
            t0 = time.perf_counter()
            commands = spec.fn(commands, self.options)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.2fms (%d commands)", spec.id, elapsed, len(commands))

        total = (time.perf_counter() - start) * 1000
        logger.debug("Pipeline complete in %.2fms", total)
        return commands


def create_pipeline(options: PathOptions | None = None) -> Pipeline:
    """Factory function for creating a pipeline on the shared registry."""
    return Pipeline(options=options)
