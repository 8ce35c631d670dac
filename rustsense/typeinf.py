"""Text-level helpers used while inferring the types of Rust expressions."""

from __future__ import annotations

from enum import Enum, auto

from rustsense.core import SearchType
from rustsense.textutil import trim_visibility, txt_matches


class BinOpKind(Enum):
    """Binary operators of the Rust language."""

    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    REM = auto()
    AND = auto()
    OR = auto()
    BIT_XOR = auto()
    BIT_AND = auto()
    BIT_OR = auto()
    SHL = auto()
    SHR = auto()
    EQ = auto()
    LT = auto()
    LE = auto()
    NE = auto()
    GE = auto()
    GT = auto()


_OPERATOR_TRAITS = {
    BinOpKind.ADD: "Add",
    BinOpKind.SUB: "Sub",
    BinOpKind.MUL: "Mul",
    BinOpKind.DIV: "Div",
    BinOpKind.REM: "Rem",
    BinOpKind.AND: "And",
    BinOpKind.OR: "Or",
    BinOpKind.BIT_XOR: "BitXor",
    BinOpKind.BIT_AND: "BitAnd",
    BinOpKind.BIT_OR: "BitOr",
    BinOpKind.SHL: "Shl",
    BinOpKind.SHR: "Shr",
}


def generate_skeleton_for_parsing(src: str) -> str | None:
    """Drop everything after the first ``{``, leaving the item header and ``{}``."""
    n = src.find("{")
    if n == -1:
        return None
    return src[: n + 1] + "}"


def get_operator_trait(op: BinOpKind) -> str:
    """Name of the trait that overloads ``op``; ``"bool"`` for comparisons."""
    return _OPERATOR_TRAITS.get(op, "bool")


def find_closing_paren(src: str, pos: int) -> int:
    """Byte offset of the ``)`` closing the group that is open at byte ``pos``.

    Returns the length of ``src`` in bytes when no closing paren is found.
    """
    data = src.encode("utf-8")
    level = 0
    for i in range(pos, len(data)):
        b = data[i]
        if b == ord(")"):
            if level == 0:
                return i
            level -= 1
        elif b == ord("("):
            level += 1
    return max(pos, len(data))


def _generic_skip(blob: bytes, generic_start: int) -> int:
    """Offset, relative to ``generic_start``, of the ``>`` closing the generics."""
    level = 0
    prev = 0x20
    for i, c in enumerate(blob[generic_start:]):
        if c == ord("<"):
            level += 1
        elif c == ord(">") and prev != ord("-"):
            level -= 1
        prev = c
        if level == 0:
            return i
    return 0


def first_param_is_self(blob: str) -> bool:
    """Whether the function declared in ``blob`` takes ``self`` as a parameter."""
    data = trim_visibility(blob).encode("utf-8")
    probable_param_start = data.find(b"(")
    if probable_param_start == -1:
        return False
    generic_start = data.find(b"<")
    skip_generic = 0
    if generic_start != -1 and generic_start < probable_param_start:
        skip_generic = _generic_skip(data, generic_start)
    found = data[skip_generic:].find(b"(")
    if found == -1:
        return False
    start = skip_generic + found + 1
    text = data.decode("utf-8")
    end = find_closing_paren(text, start)
    params = data[start:end].decode("utf-8", errors="replace")
    return txt_matches(SearchType.EXACT_MATCH, "self", params)