"""Path-command transform engine."""

from pathcommand.engine.registry import transform, Layer, get_registry, register_transforms
from pathcommand.engine.commands import Command, CommandType, Polarity, Point
from pathcommand.engine.config import PathOptions
from pathcommand.engine.pipeline import Pipeline, create_pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "register_transforms",
    "Command",
    "CommandType",
    "Polarity",
    "Point",
    "PathOptions",
    "Pipeline",
    "create_pipeline",
]
