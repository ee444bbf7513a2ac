from __future__ import annotations

"""
A minimal pygls-based Language Server for J-Bob.

Features:
- Text synchronization and document store
- Diagnostics: parse errors and build errors (special-form arity, parameter lists)
- Hover: prelude signatures and locally defined functions/theorems
- Completion: prelude names and local definitions
- Document Symbols: defun/dethm forms from the indexer

Note: We never evaluate the buffer. The index is built statically per document.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from jbob_lsp.indexer import BUILTIN_SIGNATURES, DocumentIndex, SymbolDef, build_index

logger = logging.getLogger(__name__)


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class JBobLanguageServer(LanguageServer):
    CMD_NAME = "jbob-ls"
    VERSION = "0.1.0"

    def __init__(self):
        super().__init__(self.CMD_NAME, self.VERSION)
        self.documents: Dict[str, DocumentState] = {}


ls = JBobLanguageServer()


# --- Text sync ---
@ls.feature("textDocument/didOpen")
def did_open(params: DidOpenTextDocumentParams):
    _update(params.text_document.uri, params.text_document.text or "")


@ls.feature("textDocument/didChange")
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        state = ls.documents.get(uri)
        text = state.text if state else ""
    _update(uri, text)


@ls.feature("textDocument/didClose")
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


def _update(uri: str, text: str) -> None:
    idx = build_index(text)
    ls.documents[uri] = DocumentState(text=text, index=idx)
    logger.debug("indexed %s: %d definitions, %d problems", uri, len(idx.symbols), len(idx.diagnostics))
    _publish_diagnostics(uri, idx)


# --- Diagnostics ---
def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def _publish_diagnostics(uri: str, idx: DocumentIndex):
    diags: List[Diagnostic] = [
        Diagnostic(
            range=_mk_range(d.line, d.col),
            message=d.message,
            severity=DiagnosticSeverity.Error,
            source=JBobLanguageServer.CMD_NAME,
        )
        for d in idx.diagnostics
    ]
    ls.publish_diagnostics(uri, diags)


# --- Hover ---
def _describe(sdef: SymbolDef) -> str:
    params = " ".join(sdef.params)
    return f"({sdef.name} {params}) : {sdef.kind} (defined at {sdef.line + 1}:{sdef.col + 1})"


@ls.feature("textDocument/hover")
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word = _extract_word_at(state.text, params.position)
    if not word:
        return None

    if word in state.index.symbols:
        contents = _describe(state.index.symbols[word])
    elif word in BUILTIN_SIGNATURES:
        contents = BUILTIN_SIGNATURES[word]
    else:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature("textDocument/completion")
def on_completion(params: CompletionParams) -> CompletionList:
    items: List[CompletionItem] = [
        CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig)
        for name, sig in BUILTIN_SIGNATURES.items()
    ]
    state = ls.documents.get(params.text_document.uri)
    if state:
        for name, sdef in state.index.symbols.items():
            items.append(CompletionItem(label=name, kind=CompletionItemKind.Function, detail=_describe(sdef)))
    return CompletionList(is_incomplete=False, items=items)


# --- Document Symbols ---
@ls.feature("textDocument/documentSymbol")
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    symbols: List[DocumentSymbol] = []
    for name, sdef in state.index.symbols.items():
        rng = _mk_range(sdef.line, sdef.col, len(name))
        symbols.append(
            DocumentSymbol(
                name=name,
                kind=SymbolKind.Function if sdef.kind == "function" else SymbolKind.Property,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


# --- Helpers ---
def _extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    # expand to word boundaries (anything but whitespace, parens and quote)
    start = pos.character
    while start > 0 and line[start - 1] not in " \t()'\n\r":
        start -= 1
    end = pos.character
    while end < len(line) and line[end] not in " \t()'\n\r":
        end += 1
    return line[start:end] or None


if __name__ == "__main__":
    # Run the language server over stdio
    ls.start_io()
