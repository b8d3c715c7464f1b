"""Minimal LSP server for Dium: lexer diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from dium import __version__
from dium.errors import Diagnostic as DiumDiagnostic
from dium.errors import LexError, Severity
from dium.lexer import Lexer
from dium.source import CharSource

server = LanguageServer("dium-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)

_SEVERITY = {
    Severity.ERROR: DiagnosticSeverity.Error,
    Severity.WARNING: DiagnosticSeverity.Warning,
}


def _to_lsp(diag: DiumDiagnostic) -> Diagnostic:
    # Dium positions are 1-based, LSP positions 0-based
    line = diag.position.line - 1
    col = diag.position.column - 1
    return Diagnostic(
        range=Range(
            start=Position(line=line, character=col),
            end=Position(line=line, character=col + 1),
        ),
        message=diag.message,
        severity=_SEVERITY[diag.severity],
        source="dium",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Lex the document and publish its warnings and first error."""
    doc = ls.workspace.get_text_document(uri)
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri
    lexer = Lexer(CharSource(doc.source, filename))
    found: list[DiumDiagnostic] = []

    try:
        lexer.tokenize()
    except LexError as exc:
        found.append(DiumDiagnostic.from_error(exc))

    diagnostics = [_to_lsp(d) for d in lexer.warnings + found]
    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
