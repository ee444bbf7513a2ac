import pytest

from jbob_lsp.indexer import BUILTIN_SIGNATURES, build_index


SOURCE = """\
; list helpers
(defun len (xs)
  (if (atom xs) 0 (+ 1 (len (cdr xs)))))

(dethm len/cons (x xs)
  (equal (len (cons x xs)) (+ 1 (len xs))))
"""


def test_definitions_are_indexed_with_positions():
    idx = build_index(SOURCE)
    assert set(idx.symbols) == {"len", "len/cons"}

    len_def = idx.symbols["len"]
    assert len_def.kind == "function"
    assert len_def.params == ["xs"]
    assert (len_def.line, len_def.col) == (1, 7)

    thm = idx.symbols["len/cons"]
    assert thm.kind == "theorem"
    assert thm.params == ["x", "xs"]
    assert (thm.line, thm.col) == (4, 7)
    assert idx.diagnostics == []


def test_build_errors_become_diagnostics():
    idx = build_index("(defun ok () 1)\n  (if a b)\n(defun bad (1) 2)\n")
    assert set(idx.symbols) == {"ok"}
    assert [(d.line, d.col) for d in idx.diagnostics] == [(1, 2), (2, 0)]
    assert idx.diagnostics[0].message == "if has 2 arguments, expected 3"
    assert "parameter" in idx.diagnostics[1].message


def test_parse_error_stops_indexing():
    idx = build_index("(defun a () 1)\n(defun b (x)\n")
    assert set(idx.symbols) == {"a"}
    assert len(idx.diagnostics) == 1
    diag = idx.diagnostics[0]
    assert diag.message == "unmatched '('"
    assert (diag.line, diag.col) == (1, 0)


def test_empty_document():
    idx = build_index("")
    assert idx.symbols == {}
    assert idx.diagnostics == []


def test_signatures_cover_the_prelude():
    for name in ("atom", "cons", "car", "cdr", "equal", "natp", "+", "<", "size"):
        assert name in BUILTIN_SIGNATURES


def test_runaway_nesting_becomes_a_diagnostic():
    idx = build_index("(defun a () 1)\n'" + "(" * 20000 + ")" * 20000)
    assert set(idx.symbols) == {"a"}
    assert [(d.message, d.line, d.col) for d in idx.diagnostics] == [
        ("expression nested too deeply", 1, 0)
    ]


def test_server_dependencies_are_declared():
    from importlib import metadata

    try:
        requires = metadata.requires("jbob") or []
    except metadata.PackageNotFoundError:
        pytest.skip("jbob is not installed")
    names = {req.split(";")[0].split("<")[0].split(">")[0].split("=")[0].strip() for req in requires}
    assert {"pygls", "lsprotocol"} <= names
