"""Minimal LSP server for Markscan — semantic tokens and unterminated-construct warnings."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    SemanticTokens,
    SemanticTokensLegend,
    SemanticTokensParams,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from markscan import __version__
from markscan.diagnostics import check
from markscan.escape import unescape
from markscan.lexer import scan
from markscan.lines import split_lines
from markscan.logger import get_logger
from markscan.tokens import Position as SourcePosition
from markscan.tokens import TokenType

logger = get_logger(__name__)

TOKEN_TYPES = ["comment", "string", "keyword"]

_TYPE_INDEX = {
    TokenType.LINE_COMMENT: 0,
    TokenType.BLOCK_COMMENT: 0,
    TokenType.STRING: 1,
    TokenType.TAG: 2,
}

LEGEND = SemanticTokensLegend(token_types=TOKEN_TYPES, token_modifiers=[])

server = LanguageServer(
    "markscan-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _utf16_len(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def semantic_token_data(source: str) -> list[int]:
    """Encode comment, string and tag ranges of *source* as LSP semantic tokens.

    The document is scanned as-is (no dedent) so positions match the editor
    buffer. Quoted values inside a tag are reported as strings.
    """
    data: list[int] = []
    prev_line = 0
    prev_col = 0
    for record in split_lines(scan(source)):
        line = record.number - 1
        col = 0
        for fragment in record.fragments:
            for piece in fragment.children or (fragment,):
                raw = unescape(piece.text)
                length = _utf16_len(raw.rstrip("\r"))
                kind = _TYPE_INDEX.get(piece.type)
                if kind is not None and length:
                    delta_col = col - prev_col if line == prev_line else col
                    data.extend([line - prev_line, delta_col, length, kind, 0])
                    prev_line, prev_col = line, col
                col += _utf16_len(raw)
    return data


def _lsp_position(lines: list[str], pos: SourcePosition) -> Position:
    """Convert a 1-based code-point position to a 0-based UTF-16 one."""
    prefix = lines[pos.line - 1][: pos.column - 1]
    return Position(line=pos.line - 1, character=_utf16_len(prefix))


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish a warning per unterminated construct."""
    doc = ls.workspace.get_text_document(uri)
    lines = doc.source.split("\n")
    diagnostics: list[Diagnostic] = []

    for diag in check(scan(doc.source)):
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=_lsp_position(lines, diag.span.start),
                    end=_lsp_position(lines, diag.span.end),
                ),
                message=diag.message,
                severity=DiagnosticSeverity.Warning,
                source="markscan",
            )
        )

    logger.debug("%s: %d diagnostics", uri, len(diagnostics))
    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL, LEGEND)
def semantic_tokens_full(ls: LanguageServer, params: SemanticTokensParams) -> SemanticTokens:
    doc = ls.workspace.get_text_document(params.text_document.uri)
    return SemanticTokens(data=semantic_token_data(doc.source))


def main() -> None:
    server.start_io()
