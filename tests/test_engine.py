import pytest

from treepeek.core.engine import TreeSitterEngine, load_language
from treepeek.core.node import NodeWrapper
from treepeek.errors import InvalidQueryError, NodeRangeError, UnsupportedLanguageError


@pytest.fixture
def engine():
    return TreeSitterEngine()


def test_parse_wraps_root(engine):
    root = engine.parse("go", b"package main")
    assert isinstance(root, NodeWrapper)
    assert root.kind == "source_file"
    assert root.is_named
    assert root.start_byte == 0 and root.end_byte == 12
    clause = root.children[0]
    assert [c.kind for c in clause.children] == ["package", "package_identifier"]
    assert not clause.children[0].is_named


def test_go_package_query(engine):
    root = engine.parse("go", b"package main")
    query = engine.compile_query("go", "(package_clause (package_identifier) @package)")
    matches = list(engine.execute(query, root))
    assert len(matches) == 1
    (capture,) = matches[0].captures
    assert capture.name == "package"
    assert capture.node.start_point == (0, 8)
    assert capture.node.end_point == (0, 12)
    assert capture.node.text == "main"


def test_execute_is_lazy(engine):
    root = engine.parse("python", b"a = 1\nb = 2\n")
    query = engine.compile_query("python", "(identifier) @id")
    stream = engine.execute(query, root)
    first = next(stream)
    assert first.captures[0].node.text == "a"
    assert [m.captures[0].node.text for m in stream] == ["b"]


def test_captures_follow_pattern_order(engine):
    root = engine.parse("python", b"def f(a, b): pass\n")
    query = engine.compile_query(
        "python",
        "(function_definition name: (identifier) @name parameters: (parameters) @params)",
    )
    (m,) = list(engine.execute(query, root))
    assert [(c.name, c.node.text) for c in m.captures] == [("name", "f"), ("params", "(a, b)")]


def test_repeated_capture_name_keeps_engine_order(engine):
    root = engine.parse("go", b"package main\nvar v = a + b\n")
    query = engine.compile_query(
        "go",
        '(binary_expression left: (_) @operand operator: "+" @op right: (_) @operand)',
    )
    (m,) = list(engine.execute(query, root))
    assert [(c.name, c.node.text) for c in m.captures] == [
        ("operand", "a"),
        ("op", "+"),
        ("operand", "b"),
    ]


@pytest.mark.parametrize("pattern", ["(function_definition", "(no_such_node) @x"])
def test_invalid_query(engine, pattern):
    with pytest.raises(InvalidQueryError) as exc:
        engine.compile_query("python", pattern)
    assert str(exc.value).startswith("invalid query:")


def test_unknown_grammar():
    with pytest.raises(UnsupportedLanguageError):
        load_language("definitely_not_a_grammar")


def test_node_range_checked(engine):
    root = engine.parse("go", b"package main")
    truncated = NodeWrapper(root._node, b"pack")
    with pytest.raises(NodeRangeError):
        truncated.text
