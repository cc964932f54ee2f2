import pytest

from rubyast import Node, NodeType, Symbol, UnsupportedAccessor, read_sexp, s
from rubyast.ast import arguments, body, to_value

# -- arguments ------------------------------------------------------------


def test_arguments_of_call_are_children_after_receiver_and_message() -> None:
    node = read_sexp('(send (const nil :FactoryBot) :create (sym :post) (hash (pair (sym :title) (str "post"))))')

    assert node.receiver == s("const", None, Symbol("FactoryBot"))
    assert node.message == Symbol("create")
    assert node.arguments == [
        s("sym", Symbol("post")),
        s("hash", s("pair", s("sym", Symbol("title")), s("str", "post"))),
    ]


def test_arguments_of_safe_navigation_call_without_arguments() -> None:
    node = read_sexp("(csend (lvar :user) :name)")

    assert node.arguments == []


@pytest.mark.parametrize(
    "sexp",
    [
        "(def :foo (args (arg :a) (arg :b)) nil)",
        "(defs (self) :foo (args (arg :a) (arg :b)) nil)",
        "(block (send nil :each) (args (arg :a) (arg :b)) nil)",
    ],
    ids=["def", "defs", "block"],
)
def test_arguments_of_definitions_flatten_args_node(sexp: str) -> None:
    node = read_sexp(sexp)

    assert node.arguments == [s("arg", Symbol("a")), s("arg", Symbol("b"))]


def test_arguments_of_numbered_block_wraps_parameter_count() -> None:
    node = read_sexp("(numblock (send nil :each) 2 (lvar :_1))")

    assert node.arguments == [2]
    assert node.arguments_count == 2


@pytest.mark.parametrize(
    ("sexp", "expected"),
    [
        ("(yield (int 1) (int 2))", [s("int", 1), s("int", 2)]),
        ("(defined? (ivar :@foo))", [s("ivar", Symbol("@foo"))]),
    ],
    ids=["yield", "defined"],
)
def test_arguments_of_variadic_nodes_are_all_children(sexp: str, expected: list[Node]) -> None:
    assert read_sexp(sexp).arguments == expected


@pytest.mark.parametrize("sexp", ["(int 1)", "(super (int 1))", "(lvar :a)"], ids=["int", "super", "lvar"])
def test_arguments_unsupported_for_other_types(sexp: str) -> None:
    with pytest.raises(UnsupportedAccessor) as excinfo:
        arguments(read_sexp(sexp))
    assert excinfo.value.accessor == "arguments"


# -- body -----------------------------------------------------------------


def test_body_unwraps_grouping_node() -> None:
    node = read_sexp("(def :foo (args) (begin (send nil :a) (send nil :b) (send nil :c)))")

    assert node.body == [
        s("send", None, Symbol("a")),
        s("send", None, Symbol("b")),
        s("send", None, Symbol("c")),
    ]


def test_body_with_single_statement_is_one_element_list() -> None:
    node = read_sexp("(block (send (const nil :RSpec) :configure) (args (arg :config)) (send nil :include (const nil :Helpers)))")

    assert node.body == [s("send", None, Symbol("include"), s("const", None, Symbol("Helpers")))]


def test_body_of_empty_definition_is_empty() -> None:
    assert read_sexp("(def :foo (args) nil)").body == []
    assert read_sexp("(class (const nil :Foo) nil nil)").body == []
    assert read_sexp("(module (const nil :Foo) nil)").body == []


@pytest.mark.parametrize(
    ("sexp", "expected_len"),
    [
        ("(begin (int 1) (int 2))", 2),
        ("(kwbegin (int 1) (int 2))", 2),
        ("(module (const nil :M) (begin (int 1) (int 2)))", 2),
        ("(sclass (self) (int 1))", 1),
        ("(while (true) (begin (int 1) (int 2)))", 2),
        ("(until-post (true) (kwbegin (int 1)))", 1),
        ("(when (int 1) (int 2))", 1),
        ("(class (const nil :C) nil (begin (int 1) (int 2) (int 3)))", 3),
        ("(for (lvasgn :i) (lvar :xs) (int 1))", 1),
        ("(in-pattern (int 1) nil (int 2))", 1),
        ("(resbody nil nil (begin (int 1) (int 2)))", 2),
        ("(numblock (send nil :each) 1 (lvar :_1))", 1),
        ("(defs (self) :foo (args) (begin (int 1) (int 2)))", 2),
        ("(ensure (begin (int 1) (int 2)) (int 3))", 2),
        ("(preexe (int 1))", 1),
        ("(postexe nil)", 0),
    ],
    ids=lambda value: value if isinstance(value, str) else None,
)
def test_body_start_positions_per_type(sexp: str, expected_len: int) -> None:
    assert len(read_sexp(sexp).body) == expected_len


def test_body_of_rescue_is_only_the_protected_statement() -> None:
    node = read_sexp("(rescue (send nil :foo) (resbody nil nil (send nil :bar)) nil)")

    assert node.body == [s("send", None, Symbol("foo"))]


def test_body_unsupported_for_call() -> None:
    with pytest.raises(UnsupportedAccessor):
        body(read_sexp("(send nil :foo)"))


# -- branch statements ----------------------------------------------------


def test_case_when_statements_and_else() -> None:
    node = read_sexp("(case (lvar :x) (when (int 1) (sym :one)) (when (int 2) (sym :two)) (sym :many))")

    assert node.expression == s("lvar", Symbol("x"))
    assert [when.expression for when in node.when_statements] == [s("int", 1), s("int", 2)]
    assert node.else_statement == s("sym", Symbol("many"))


def test_case_match_in_statements() -> None:
    node = read_sexp("(case-match (lvar :x) (in-pattern (int 1) nil (sym :one)) nil)")

    assert node.in_statements == [s("in_pattern", s("int", 1), None, s("sym", Symbol("one")))]
    assert node.else_statement is None


def test_rescue_bodies_and_ensure_body() -> None:
    node = read_sexp(
        "(ensure (rescue (send nil :foo) (resbody (array (const nil :ArgumentError)) (lvasgn :e) (send nil :bar)) nil) (send nil :baz))"
    )
    rescue = node.body[0]

    assert isinstance(rescue, Node)
    assert len(rescue.rescue_bodies) == 1
    resbody = rescue.rescue_bodies[0]
    assert resbody.exceptions == s("array", s("const", None, Symbol("ArgumentError")))
    assert resbody.variable == s("lvasgn", Symbol("e"))
    assert resbody.body == [s("send", None, Symbol("bar"))]
    assert node.ensure_body == [s("send", None, Symbol("baz"))]


def test_if_statement_slots() -> None:
    node = read_sexp("(if (lvar :a) (int 1) (int 2))")

    assert node.expression == s("lvar", Symbol("a"))
    assert node.if_statement == s("int", 1)
    assert node.else_statement == s("int", 2)


def test_else_statement_is_last_child_for_any_type() -> None:
    assert read_sexp("(send nil :foo (int 1))").else_statement == s("int", 1)
    assert s("nil").else_statement is None


@pytest.mark.parametrize(
    ("accessor", "sexp"),
    [
        ("when_statements", "(if (true) nil nil)"),
        ("in_statements", "(case (lvar :x) nil)"),
        ("rescue_bodies", "(ensure nil nil)"),
        ("ensure_body", "(rescue nil nil)"),
        ("options", "(str \"foo\")"),
        ("exceptions", "(rescue nil nil)"),
        ("elements", "(hash)"),
    ],
)
def test_type_restricted_accessors_raise_for_other_types(accessor: str, sexp: str) -> None:
    with pytest.raises(UnsupportedAccessor) as excinfo:
        getattr(read_sexp(sexp), accessor)
    assert excinfo.value.accessor == accessor


# -- elements / options ---------------------------------------------------


def test_elements_of_array_like_nodes() -> None:
    assert read_sexp("(array (int 1) (int 2))").elements == [s("int", 1), s("int", 2)]
    assert read_sexp("(mlhs (lvasgn :a) (lvasgn :b))").elements == [s("lvasgn", Symbol("a")), s("lvasgn", Symbol("b"))]
    assert read_sexp("(undef (sym :foo))").elements == [s("sym", Symbol("foo"))]
    assert read_sexp("(regopt :i :m)").elements == [Symbol("i"), Symbol("m")]


def test_regexp_elements_exclude_options() -> None:
    node = read_sexp('(regexp (str "foo") (begin (lvar :bar)) (regopt :i))')

    assert node.elements == [s("str", "foo"), s("begin", s("lvar", Symbol("bar")))]
    assert node.options == s("regopt", Symbol("i"))


# -- hashes ---------------------------------------------------------------

HASH_SEXP = '(hash (pair (int 1) (int 2)) (kwsplat (send nil :bar)) (pair (sym :baz) (int 3)) (pair (str "baz") (int 4)))'


def test_pairs_and_kwsplats_filter_children() -> None:
    node = read_sexp(HASH_SEXP)

    assert [pair.key for pair in node.pairs] == [s("int", 1), s("sym", Symbol("baz")), s("str", "baz")]
    assert node.kwsplats == [s("kwsplat", s("send", None, Symbol("bar")))]


def test_keys_and_values() -> None:
    node = read_sexp(HASH_SEXP)

    assert node.keys == [s("int", 1), s("sym", Symbol("baz")), s("str", "baz")]
    assert node.values == [s("int", 2), s("int", 3), s("int", 4)]


def test_key_lookup_distinguishes_symbols_and_strings() -> None:
    node = read_sexp(HASH_SEXP)

    assert node.has_key(Symbol("baz"))
    assert node.has_key("baz")
    assert node.has_key(1)
    assert not node.has_key("missing")
    assert node.hash_value(Symbol("baz")) == s("int", 3)
    assert node.hash_value("baz") == s("int", 4)
    assert node.hash_pair(1) == s("pair", s("int", 1), s("int", 2))


def test_hash_lookup_of_missing_key_returns_none() -> None:
    node = read_sexp(HASH_SEXP)

    assert node.hash_pair("missing") is None
    assert node.hash_value("missing") is None


def test_boolean_keys_do_not_match_integers() -> None:
    node = read_sexp('(hash (pair (true) (str "yes")) (pair (int 0) (str "zero")) (pair (float 2.0) (str "two")))')

    assert node.hash_value(True) == s("str", "yes")
    assert node.hash_value(1) is None
    assert not node.has_key(1)
    assert not node.has_key(False)
    assert node.hash_pair(False) is None
    assert node.hash_value(0) == s("str", "zero")
    assert node.hash_value(2) == s("str", "two")


def test_array_keys_compare_elements_without_bool_int_mixing() -> None:
    node = read_sexp('(hash (pair (array (true)) (sym :flag)))')

    assert node.has_key([True])
    assert not node.has_key([1])


def test_hash_pattern_supports_pair_accessors() -> None:
    node = read_sexp("(hash-pattern (pair (sym :name) (match-var :n)))")

    assert node.has_key(Symbol("name"))
    assert node.hash_value(Symbol("name")) == s("match_var", Symbol("n"))


@pytest.mark.parametrize("accessor", ["pairs", "kwsplats", "keys", "values"])
def test_hash_accessors_unsupported_for_array(accessor: str) -> None:
    with pytest.raises(UnsupportedAccessor):
        getattr(read_sexp("(array)"), accessor)


@pytest.mark.parametrize("method", ["has_key", "hash_pair", "hash_value"])
def test_hash_lookups_unsupported_for_array(method: str) -> None:
    with pytest.raises(UnsupportedAccessor) as excinfo:
        getattr(read_sexp("(array)"), method)("foo")
    assert excinfo.value.accessor == method


# -- to_value / to_source -------------------------------------------------


@pytest.mark.parametrize(
    ("sexp", "expected"),
    [
        ("(int 42)", 42),
        ("(float 2.5)", 2.5),
        ('(str "text")', "text"),
        ("(sym :name)", Symbol("name")),
        ("(true)", True),
        ("(false)", False),
        ("(nil)", None),
        ('(array (int 1) (str "two") (sym :three))', [1, "two", Symbol("three")]),
        ("(array (array (int 1)) (true))", [[1], True]),
        ("(begin (int 7))", 7),
        ("(kwbegin (begin (sym :deep)))", Symbol("deep")),
        ("(begin)", None),
    ],
)
def test_to_value_collapses_literals(sexp: str, expected: object) -> None:
    assert read_sexp(sexp).to_value() == expected


def test_to_value_returns_other_nodes_unchanged() -> None:
    node = read_sexp("(send nil :foo)")
    array = read_sexp("(array (lvar :a) (int 1))")

    assert node.to_value() is node
    assert to_value(array) == [array.children[0], 1]
    assert to_value(array)[0] is array.children[0]


def test_to_value_of_empty_array_is_empty_list() -> None:
    assert read_sexp("(array)").to_value() == []


def test_to_source_without_span_is_none() -> None:
    assert read_sexp("(int 1)").to_source() is None


def test_to_source_returns_spanned_text() -> None:
    from rubyast import SourceSpan

    source = "foo(1, bar)\n"
    node = Node(NodeType.INT, [1], SourceSpan.find(source, "1"))

    assert node.to_source() == "1"
    assert node.span is not None
    assert (node.span.line, node.span.column) == (1, 4)


# -- node types outside the schema ---------------------------------------

KWARGS_SEXP = "(send nil :foo (kwargs (pair (sym :a) (int 1))))"


@pytest.mark.parametrize("accessor", ["receiver", "body", "arguments", "pairs", "elements", "value"])
def test_unknown_node_type_accessors_raise_unsupported_accessor(accessor: str) -> None:
    kwargs = read_sexp(KWARGS_SEXP).arguments[0]

    with pytest.raises(UnsupportedAccessor) as excinfo:
        getattr(kwargs, accessor)
    assert excinfo.value.accessor == accessor
    assert excinfo.value.node_type == "kwargs"


def test_unknown_node_type_to_value_returns_the_node() -> None:
    kwargs = read_sexp(KWARGS_SEXP).arguments[0]

    assert kwargs.to_value() is kwargs
    assert kwargs.else_statement == s("pair", s("sym", Symbol("a")), s("int", 1))


def test_known_node_with_unknown_type_children() -> None:
    node = Node("block", [s("lambda"), s("args"), s("int", 1)])

    assert node.body == [s("int", 1)]
    assert node.caller == Node("lambda")
