import pytest

from rustsense.typeinf import (
    BinOpKind,
    find_closing_paren,
    first_param_is_self,
    generate_skeleton_for_parsing,
    get_operator_trait,
)


def test_generates_skeleton_for_mod():
    assert generate_skeleton_for_parsing("mod foo { blah }") == "mod foo {}"


def test_skeleton_keeps_header_of_impl():
    src = "impl<T> Foo<T> {\n    fn new() {}\n}"
    assert generate_skeleton_for_parsing(src) == "impl<T> Foo<T> {}"


def test_skeleton_without_brace_is_none():
    assert generate_skeleton_for_parsing("struct Foo;") is None


@pytest.mark.parametrize(
    "op, expected",
    [
        (BinOpKind.ADD, "Add"),
        (BinOpKind.SUB, "Sub"),
        (BinOpKind.MUL, "Mul"),
        (BinOpKind.DIV, "Div"),
        (BinOpKind.REM, "Rem"),
        (BinOpKind.AND, "And"),
        (BinOpKind.OR, "Or"),
        (BinOpKind.BIT_XOR, "BitXor"),
        (BinOpKind.BIT_AND, "BitAnd"),
        (BinOpKind.BIT_OR, "BitOr"),
        (BinOpKind.SHL, "Shl"),
        (BinOpKind.SHR, "Shr"),
    ],
)
def test_operator_traits(op, expected):
    assert get_operator_trait(op) == expected


@pytest.mark.parametrize(
    "op",
    [BinOpKind.EQ, BinOpKind.LT, BinOpKind.LE, BinOpKind.NE, BinOpKind.GE, BinOpKind.GT],
)
def test_comparison_operators_give_bool(op):
    assert get_operator_trait(op) == "bool"


def test_find_closing_paren_nested():
    assert find_closing_paren("(a(b)c)d", 1) == 6


def test_find_closing_paren_simple():
    assert find_closing_paren("foo(bar)", 4) == 7


def test_find_closing_paren_unclosed_gives_length():
    assert find_closing_paren("foo(bar", 4) == 7


def test_find_closing_paren_counts_bytes():
    assert find_closing_paren("(ä)", 1) == 3


@pytest.mark.parametrize(
    "blob, expected",
    [
        ("pub fn map<U, F: FnOnce(T) -> U>(self, f: F) -> Option<U>", True),
        ("fn method(self)", True),
        ("fn mymethod(&self)", True),
        ("pub fn another_method(self, feio: uint)", True),
        ("pub(crate) fn get_bar(&self) -> &str", True),
        ("crate fn another_method(self, feio: uint)", True),
        ("pub (in super) fn foo(&mut self)", True),
        ("fn new() -> Self", False),
        ("fn traitf() -> bool", False),
        ("fn foo<T>(_: T)", False),
        ("fn x(selfish: u8)", False),
        ("fn make() -> Vec<T>", False),
        ("fn missing_parens", False),
    ],
)
def test_first_param_is_self(blob, expected):
    assert first_param_is_self(blob) is expected


def test_first_param_is_self_with_generic_method():
    assert first_param_is_self("fn with<T: Into<String>>(&self, t: T)") is True