"""Minimal LSP server for OpenFOAM dictionaries — diagnostics, hover, unit hints."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lsprotocol.types import (
    INITIALIZE,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_INLAY_HINT,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Hover,
    HoverParams,
    InitializeParams,
    InlayHint,
    InlayHintKind,
    InlayHintParams,
    MarkupContent,
    MarkupKind,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from foamls import __version__
from foamls.cli import load_config
from foamls.errors import LexError
from foamls.hover import hover as hover_at
from foamls.lexer import scan
from foamls.positions import PositionIndex
from foamls.tokens import Span
from foamls.validate import find_errors, unit_hints

logger = logging.getLogger(__name__)

server = LanguageServer("foamls", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


@dataclass(slots=True)
class ServerSettings:
    """Options read from foamls.toml and initializationOptions."""

    identifiers: bool = False
    log_level: str | None = None


settings = ServerSettings()


def _range(index: PositionIndex, span: Span) -> Range:
    start_line, start_col = index.position(span.start)
    end_line, end_col = index.position(span.end)
    return Range(
        start=Position(line=start_line, character=start_col),
        end=Position(line=end_line, character=end_col),
    )


def _apply_log_level(raw: str | None) -> None:
    """Set the package logger level from a string like 'debug', 'warning', etc."""
    if not raw:
        return
    level = getattr(logging, raw.upper(), None)
    if isinstance(level, int):
        logging.getLogger("foamls").setLevel(level)


def configure(options: Any, root: Path | None = None) -> None:
    """Update settings from foamls.toml in root, then from initializationOptions."""
    if root is not None:
        config = load_config(None, root)
        cfg_lexer = config.get("lexer")
        if isinstance(cfg_lexer, dict) and isinstance(cfg_lexer.get("identifiers"), bool):
            settings.identifiers = cfg_lexer["identifiers"]
        cfg_server = config.get("server")
        if isinstance(cfg_server, dict) and isinstance(cfg_server.get("log_level"), str):
            settings.log_level = cfg_server["log_level"]

    if isinstance(options, dict):
        if isinstance(options.get("identifiers"), bool):
            settings.identifiers = options["identifiers"]
        if isinstance(options.get("logLevel"), str):
            settings.log_level = options["logLevel"]

    _apply_log_level(settings.log_level)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan and validate the document, then publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    index = PositionIndex(source)
    diagnostics: list[Diagnostic] = []

    try:
        stream = scan(source, identifiers=settings.identifiers)
    except LexError as exc:
        line, col = index.position(exc.offset)
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=line, character=col),
                    end=Position(line=line, character=col + 1),
                ),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="foamls",
            )
        )
    else:
        for span, message in sorted(find_errors(stream).items(), key=lambda item: item[0].start):
            diagnostics.append(
                Diagnostic(
                    range=_range(index, span),
                    message=message,
                    severity=DiagnosticSeverity.Warning,
                    source="foamls",
                )
            )

    logger.debug("_validate: %s -> %d diagnostics", uri, len(diagnostics))
    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


def _hover(ls: LanguageServer, uri: str, position: Position) -> Hover | None:
    doc = ls.workspace.get_text_document(uri)
    try:
        info = hover_at(
            doc.source, position.line, position.character, identifiers=settings.identifiers
        )
    except LexError as exc:
        logger.debug("_hover: %s does not scan: %s", uri, exc.message)
        return None
    if info is None:
        return None
    return Hover(
        contents=MarkupContent(kind=MarkupKind.PlainText, value=info.documentation),
        range=Range(
            start=Position(line=info.line, character=info.start_character),
            end=Position(line=info.line, character=info.end_character),
        ),
    )


def _inlay_hints(ls: LanguageServer, uri: str, visible: Range) -> list[InlayHint]:
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    try:
        stream = scan(source, identifiers=settings.identifiers)
    except LexError as exc:
        logger.debug("_inlay_hints: %s does not scan: %s", uri, exc.message)
        return []

    index = PositionIndex(source)
    hints: list[InlayHint] = []
    first = (visible.start.line, visible.start.character)
    last = (visible.end.line, visible.end.character)
    for span, label in sorted(unit_hints(stream).items(), key=lambda item: item[0].start):
        line, col = index.position(span.end)
        if not first <= (line, col) <= last:
            continue
        hints.append(
            InlayHint(
                position=Position(line=line, character=col),
                label=label,
                kind=InlayHintKind.Type,
                padding_left=True,
            )
        )
    return hints


@server.feature(INITIALIZE)
def initialize(ls: LanguageServer, params: InitializeParams) -> None:
    root = Path(params.root_path) if params.root_path else None
    configure(params.initialization_options, root)


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: LanguageServer, params: HoverParams) -> Hover | None:
    return _hover(ls, params.text_document.uri, params.position)


@server.feature(TEXT_DOCUMENT_INLAY_HINT)
def inlay_hint(ls: LanguageServer, params: InlayHintParams) -> list[InlayHint]:
    return _inlay_hints(ls, params.text_document.uri, params.range)


def main() -> None:
    logging.basicConfig(level=logging.WARNING)
    server.start_io()
