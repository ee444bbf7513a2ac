from __future__ import annotations

"""
Static indexer for J-Bob source files.

Each top-level form is read and built (never evaluated) with a private
SymbolTable, which yields:
- definitions: (defun name (params...) body) and (dethm name (params...) body)
- diagnostics: the first parse error, and every build error such as a wrong
  special-form arity or a malformed parameter list

Positions are 0-based (line, col), as the LSP expects.
"""

from dataclasses import dataclass, field
from itertools import islice
from typing import Dict, List, Optional

from jbob.errors import BuildError, ParseError
from jbob.evaluation.ast import Define
from jbob.evaluation.builder import AstBuilder
from jbob.reader.parser import TokenStream, lex, position
from jbob.types.symbol import SymbolTable


@dataclass
class SymbolDef:
    name: str
    kind: str  # "function" | "theorem"
    params: List[str]
    line: int
    col: int


@dataclass
class DiagnosticInfo:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    diagnostics: List[DiagnosticInfo] = field(default_factory=list)


def _zero_based(text: str, offset: int) -> tuple[int, int]:
    line, col, _ = position(text, offset)
    return line - 1, col - 1


def _name_offset(text: str, form_offset: int) -> Optional[int]:
    # Tokens of "(defun name ...": lparen, head, name
    tokens = list(islice(lex(text[form_offset:]), 3))
    if len(tokens) < 3:
        return None
    return form_offset + tokens[2].offset


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    symbols = SymbolTable()
    builder = AstBuilder(symbols)
    stream = TokenStream(text, symbols)

    while (start := stream.peek()) is not None:
        try:
            form = stream.parse_form()
        except ParseError as err:
            # The rest of the buffer cannot be trusted after a parse error
            idx.diagnostics.append(DiagnosticInfo(err.message, err.line - 1, err.column - 1))
            break
        try:
            node = builder.build(form)
        except (BuildError, RecursionError) as err:
            message = str(err) if isinstance(err, BuildError) else "expression nested too deeply"
            line, col = _zero_based(text, start.offset)
            idx.diagnostics.append(DiagnosticInfo(message, line, col))
            continue
        if isinstance(node, Define):
            name_offset = _name_offset(text, start.offset)
            line, col = _zero_based(text, name_offset if name_offset is not None else start.offset)
            kind = "theorem" if str(form.car) == "dethm" else "function"
            idx.symbols[str(node.name)] = SymbolDef(
                name=str(node.name),
                kind=kind,
                params=[str(p) for p in node.parameters],
                line=line,
                col=col,
            )
    return idx


# Prelude and special-form signatures for hover without evaluation
BUILTIN_SIGNATURES: Dict[str, str] = {
    "atom": "(atom x)",
    "cons": "(cons x y)",
    "car": "(car x)",
    "cdr": "(cdr x)",
    "equal": "(equal x y)",
    "natp": "(natp x)",
    "+": "(+ x y)",
    "<": "(< x y)",
    "size": "(size x)",
    "quote": "(quote x)",
    "if": "(if q a e)",
    "defun": "(defun name (params...) body)",
    "dethm": "(dethm name (params...) body)",
}
