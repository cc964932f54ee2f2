import pytest

from rubyast import (
    HashSuffix,
    Node,
    SourceSpan,
    Symbol,
    can_resolve_dynamic,
    read_sexp,
    resolve_dynamic,
    s,
)

SOURCE = 'link_to "Home", root_path, class: "nav", "data-turbo" => false\n'


def _spanned_options_hash() -> Node:
    def at(snippet: str) -> SourceSpan:
        return SourceSpan.find(SOURCE, snippet)

    class_pair = s(
        "pair",
        s("sym", Symbol("class"), span=at("class")),
        s("str", "nav", span=at('"nav"')),
        span=at('class: "nav"'),
    )
    data_pair = s(
        "pair",
        s("str", "data-turbo", span=at('"data-turbo"')),
        s("false", span=at("false")),
        span=at('"data-turbo" => false'),
    )
    return s("hash", class_pair, data_pair, span=at('class: "nav", "data-turbo" => false'))


def test_symbol_key_families() -> None:
    node = _spanned_options_hash()
    class_pair = node.pairs[0]

    assert node.class_pair is class_pair
    assert node.class_value is class_pair.value
    assert node.class_source == '"nav"'


def test_string_key_is_tried_after_symbol_key() -> None:
    node = _spanned_options_hash()

    assert resolve_dynamic(node, "data-turbo_pair") is node.pairs[1]
    assert resolve_dynamic(node, "data-turbo_value") == s("false")
    assert resolve_dynamic(node, "data-turbo_source") == "false"


def test_missing_key_gives_none_none_and_empty_source() -> None:
    node = _spanned_options_hash()

    assert node.missing_pair is None
    assert node.missing_value is None
    assert node.missing_source == ""


def test_foo_bar_lookup_round() -> None:
    source = 'foo: "bar"'
    value = s("str", "bar", span=SourceSpan.find(source, '"bar"'))
    node = s("hash", s("pair", s("sym", Symbol("foo"), span=SourceSpan.find(source, "foo")), value))

    assert node.foo_pair == node.children[0]
    assert node.foo_value is value
    assert node.foo_source == '"bar"'
    assert (node.missing_pair, node.missing_value, node.missing_source) == (None, None, "")


def test_source_of_value_without_span_is_none() -> None:
    node = read_sexp("(hash (pair (sym :foo) (int 1)))")

    assert node.foo_source is None


def test_suffixes_resolve_in_pair_value_source_order() -> None:
    node = read_sexp("(hash (pair (sym :foo_value) (int 1)) (pair (sym :foo) (int 2)))")

    assert node.foo_value_pair == s("pair", s("sym", Symbol("foo_value")), s("int", 1))
    assert node.foo_value == s("int", 2)
    assert [suffix.value for suffix in HashSuffix] == ["_pair", "_value", "_source"]


def test_can_resolve_dynamic_mirrors_key_presence() -> None:
    node = _spanned_options_hash()

    assert can_resolve_dynamic(node, "class_pair")
    assert can_resolve_dynamic(node, "class_value")
    assert can_resolve_dynamic(node, "class_source")
    assert can_resolve_dynamic(node, "data-turbo_value")
    assert not can_resolve_dynamic(node, "missing_value")
    assert not can_resolve_dynamic(node, "missing_source")
    assert not can_resolve_dynamic(node, "class")


def test_unrecognized_names_raise_attribute_error() -> None:
    node = _spanned_options_hash()

    with pytest.raises(AttributeError):
        _ = node.class_unknown
    with pytest.raises(AttributeError):
        resolve_dynamic(node, "class")
    assert not hasattr(node, "nonsense")
    assert not hasattr(node, "_private")


def test_key_families_only_apply_to_hash_nodes() -> None:
    pattern = read_sexp("(hash-pattern (pair (sym :a) (int 1)))")
    array = read_sexp("(array (int 1))")

    with pytest.raises(AttributeError):
        _ = pattern.a_value
    with pytest.raises(AttributeError):
        _ = array.a_value
    assert not can_resolve_dynamic(pattern, "a_value")


def test_args_node_forwards_to_children_tuple() -> None:
    node = read_sexp("(args (arg :a) (arg :b) (arg :a))")

    assert node.count(s("arg", Symbol("a"))) == 2
    assert node.index(s("arg", Symbol("b"))) == 1
    assert resolve_dynamic(node, "index", s("arg", Symbol("a"))) == 0
    assert can_resolve_dynamic(node, "count")
    assert not can_resolve_dynamic(node, "first")
    with pytest.raises(AttributeError):
        _ = node.first


def test_args_node_sequence_protocol_goes_through_children() -> None:
    node = read_sexp("(args (arg :a) (arg :b))")

    with pytest.raises(TypeError):
        len(node)
    assert len(node.children) == 2
    assert node.children[1] == s("arg", Symbol("b"))
    assert bool(s("args"))


def test_dynamic_lookup_is_repeatable() -> None:
    node = _spanned_options_hash()

    assert [node.class_value for _ in range(3)] == [node.class_value] * 3
    assert node.class_source == node.class_source
