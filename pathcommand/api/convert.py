"""POST /api/convert/* -- path data and whole-document conversion."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException

from pathcommand.config import Settings
from pathcommand.converter import convert_path_commands
from pathcommand.dependencies import get_settings
from pathcommand.engine.config import PathOptions
from pathcommand.errors import DocumentParseError, PathParseError
from pathcommand.models.requests import ConvertOptions, DocumentConvertRequest, PathConvertRequest
from pathcommand.models.responses import CommandModel, DocumentConvertResponse, PathConvertResponse
from pathcommand.svg.document import convert_svg_document, find_path_elements
from pathcommand.svg.path_serializer import serialize_commands

router = APIRouter()
logger = logging.getLogger(__name__)


def build_options(
    requested: ConvertOptions,
    settings: Settings,
    diagnostics: Callable[[str], None] | None = None,
) -> PathOptions:
    """Merge configured defaults with the flags the request actually set."""
    known = set(PathOptions.flag_names())
    flags: dict[str, bool] = {}
    for name, value in settings.default_options.items():
        if name in known:
            flags[name] = value
        else:
            logger.warning("Ignoring unknown default option %r", name)
    flags.update(requested.model_dump(exclude_unset=True))
    return PathOptions(**flags, diagnostics=diagnostics)


@router.post("/convert/path", response_model=PathConvertResponse)
async def convert_path(
    req: PathConvertRequest,
    settings: Settings = Depends(get_settings),
) -> PathConvertResponse:
    messages: list[str] = []
    options = build_options(req.options, settings, messages.append)

    try:
        commands = convert_path_commands(req.d, replace(options, return_structured=True))
    except PathParseError as e:
        logger.info("Rejected path data: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    d = serialize_commands(
        commands,
        add_line_breaks=options.add_line_breaks,
        correct_floating_point=options.correct_floating_point,
    )
    return PathConvertResponse(
        d=d,
        commands=[CommandModel.from_command(c) for c in commands] if options.return_structured else None,
        diagnostics=messages,
    )


@router.post("/convert/document", response_model=DocumentConvertResponse)
async def convert_document(
    req: DocumentConvertRequest,
    settings: Settings = Depends(get_settings),
) -> DocumentConvertResponse:
    messages: list[str] = []
    options = build_options(req.options, settings, messages.append)

    try:
        svg = convert_svg_document(req.svg, options)
    except DocumentParseError as e:
        logger.info("Rejected document: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    # Splicing keeps element order, so before/after pair up
    before = find_path_elements(req.svg)
    after = find_path_elements(svg)
    changed = sum(1 for old, new in zip(before, after) if old.d != new.d)

    return DocumentConvertResponse(svg=svg, paths_converted=changed, diagnostics=messages)
