"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pathcommand.engine.commands import Command


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class CommandModel(BaseModel):
    letter: str
    type: str
    polarity: str
    parameters: list[float] = Field(default_factory=list)

    @classmethod
    def from_command(cls, cmd: Command) -> CommandModel:
        return cls(
            letter=cmd.letter,
            type=cmd.type.name.lower(),
            polarity=cmd.polarity.value,
            parameters=list(cmd.parameters),
        )


class PathConvertResponse(BaseModel):
    d: str
    commands: list[CommandModel] | None = None
    diagnostics: list[str] = Field(default_factory=list)


class DocumentConvertResponse(BaseModel):
    svg: str
    paths_converted: int = 0
    diagnostics: list[str] = Field(default_factory=list)
