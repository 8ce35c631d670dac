"""Small text helpers for scanning Rust source.

All positions are UTF-8 byte offsets into the source text.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

from rustsense.core import ByteRange, SearchType

T = TypeVar("T")

_TUPLE_FIELDS = tuple(str(n) for n in range(16))


def is_pattern_char(c: str) -> bool:
    return c.isalnum() or c.isspace() or c in "_:."


def is_search_expr_char(c: str) -> bool:
    return c.isalnum() or c in "_:."


def is_ident_char(c: str) -> bool:
    return c.isalnum() or c in "_!"


def is_whitespace_byte(b: int) -> bool:
    return b in (0x20, 0x0D, 0x0A, 0x09)


def _byte_len(s: str) -> int:
    return len(s.encode("utf-8"))


def _char_indices(s: str) -> Iterator[tuple[int, str]]:
    """Yield ``(byte_offset, char)`` pairs for ``s``."""
    offset = 0
    for ch in s:
        yield offset, ch
        offset += _byte_len(ch)


def txt_matches(stype: SearchType, needle: str, haystack: str) -> bool:
    """Whether ``needle`` occurs in ``haystack`` as a standalone identifier."""
    return txt_matches_with_pos(stype, needle, haystack) is not None


def txt_matches_with_pos(stype: SearchType, needle: str, haystack: str) -> int | None:
    """Byte offset of the first identifier-bounded occurrence of ``needle``."""
    if not needle:
        return 0
    n_len = len(needle)
    start = 0
    while (n := haystack.find(needle, start)) != -1:
        start = n + n_len
        before_ok = n == 0 or not is_ident_char(haystack[n - 1])
        if stype is SearchType.EXACT_MATCH:
            end = n + n_len
            after_ok = end == len(haystack) or not is_ident_char(haystack[end])
            if before_ok and after_ok:
                return _byte_len(haystack[:n])
        elif before_ok:
            return _byte_len(haystack[:n])
    return None


def symbol_matches(stype: SearchType, searchstr: str, candidate: str) -> bool:
    if stype is SearchType.EXACT_MATCH:
        return searchstr == candidate
    return candidate.startswith(searchstr)


def _closure_arg_span(src: str) -> tuple[int, int] | None:
    """Character span of the ``|...|`` argument list, end exclusive."""
    left = src.find("|")
    if left == -1:
        return None
    brace_level = 0
    for i, c in enumerate(src[left + 1:]):
        if c == "{":
            brace_level += 1
        elif c == "}":
            brace_level -= 1
        elif c == "|":
            if brace_level == 0:
                return left, left + 1 + i + 1
            break
        elif c == ";":
            break
        if brace_level < 0:
            break
    return None


def closure_valid_arg_scope(scope_src: str) -> tuple[ByteRange, str] | None:
    """Find a closure argument list ``|...|`` in ``scope_src``."""
    span = _closure_arg_span(scope_src)
    if span is None:
        return None
    left, right = span
    text = scope_src[left:right]
    start = _byte_len(scope_src[:left])
    return ByteRange(start, start + _byte_len(text)), text


def find_closure(src: str) -> tuple[ByteRange, ByteRange] | None:
    """Return the argument range and body range of the first closure in ``src``."""
    found = closure_valid_arg_scope(src)
    if found is None:
        return None
    pipe_range, _ = found
    _, pipe_end = _closure_arg_span(src)  # type: ignore[misc]

    body_from = pipe_end + (len(src[pipe_end:]) - len(src[pipe_end:].lstrip()))
    if body_from >= len(src):
        return None
    start_char = src[body_from]
    braced = start_char == "{"
    start = body_from + 1 if braced else body_from

    clevel = 1 if braced else 0
    plevel = 0
    last = None
    for i, current in enumerate(src[body_from + 1:], start=body_from + 1):
        if current == "{":
            clevel += 1
        elif current == "(":
            plevel += 1
        elif current == "}":
            clevel -= 1
            if (clevel == 0 and braced) or clevel == -1:
                last = i
                break
        elif current == ";":
            if not braced:
                last = i
                break
        elif current == ")":
            plevel -= 1
            if plevel == 0:
                last = i + 1
            if plevel == -1:
                last = i + 1
                break
    if last is None:
        return None
    body = ByteRange(_byte_len(src[:start]), _byte_len(src[:last]))
    return pipe_range, body


def find_ident_end(s: str, pos: int) -> int:
    """Byte offset where the identifier starting at ``pos`` ends."""
    tail = s.encode("utf-8")[pos:].decode("utf-8")
    for i, c in _char_indices(tail):
        if not is_ident_char(c):
            return pos + i
    return _byte_len(s)


def char_before(src: str, i: int) -> str:
    """The last character starting before byte offset ``i`` (``'\\0'`` if none)."""
    prev = "\0"
    for offset, ch in _char_indices(src):
        if offset >= i:
            return prev
        prev = ch
    return prev


def char_at(src: str, i: int) -> str:
    """The character starting at byte offset ``i``."""
    tail = src.encode("utf-8")[i:].decode("utf-8")
    if not tail:
        raise IndexError(f"no character at byte offset {i}")
    return tail[0]


def _strip_word_impl(src: bytes, allow_paren: bool) -> int | None:
    level = 0
    for i, b in enumerate(src):
        if allow_paren and b == ord("("):
            level += 1
        elif allow_paren and b == ord(")"):
            level -= 1
        elif level >= 1:
            continue
        elif not is_whitespace_byte(b):
            return i if i != 0 else None
    return None


def _strip_prefix(src: bytes, word: bytes, allow_paren: bool) -> int | None:
    if not src.startswith(word):
        return None
    rest = _strip_word_impl(src[len(word):], allow_paren)
    return None if rest is None else rest + len(word)


def strip_visibility(src: str) -> int | None:
    """Byte offset just past a leading ``pub(...)`` or ``crate``."""
    data = src.encode("utf-8")
    if data.startswith(b"pub"):
        return _strip_prefix(data, b"pub", True)
    if data.startswith(b"crate"):
        return _strip_prefix(data, b"crate", False)
    return None


def strip_word(src: str, word: str) -> int | None:
    """Byte offset just past a leading ``word`` and the whitespace after it."""
    return _strip_prefix(src.encode("utf-8"), word.encode("utf-8"), False)


def strip_words(src: str, words: list[str] | tuple[str, ...]) -> int:
    """Skip each of ``words`` in turn where present; return the byte offset reached."""
    data = src.encode("utf-8")
    start = 0
    for word in words:
        start += _strip_prefix(data[start:], word.encode("utf-8"), False) or 0
    return start


def trim_visibility(blob: str) -> str:
    """Remove a leading visibility qualifier from ``blob``."""
    start = strip_visibility(blob)
    if start is None:
        return blob
    return blob.encode("utf-8")[start:].decode("utf-8")


def in_fn_name(line_before_point: str) -> bool:
    """Whether the cursor sits in the name of a function being declared."""
    has_started_name = not (line_before_point and line_before_point[-1].isspace())
    words = iter(reversed(line_before_point.split()))
    if has_started_name:
        ident = next(words, None)
        if ident is not None and not all(is_ident_char(c) for c in ident):
            return False
    return next(words, None) == "fn"


def calculate_str_hash(s: str) -> int:
    """A stable 64-bit hash of ``s``."""
    digest = hashlib.blake2b(s.encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "little")


def gen_tuple_fields(u: int) -> Iterator[str]:
    """Names of the first ``u`` tuple fields, at most 16."""
    yield from _TUPLE_FIELDS[: max(0, min(u, 16))]


@dataclass(frozen=True)
class ExpandedIdent:
    """An identifier found by backtracking from a cursor position."""

    src: str
    start: int
    pos: int

    def ident(self) -> str:
        return self.src.encode("utf-8")[self.start:self.pos].decode("utf-8")


def expand_ident(src: str, pos: int) -> ExpandedIdent:
    """Backtrack from byte offset ``pos`` to the start of the identifier there."""
    data = src.encode("utf-8")
    pos = max(0, min(len(data), pos))
    before = data[:pos].decode("utf-8")
    start = pos
    for offset, c in reversed(list(_char_indices(before))):
        if not is_ident_char(c):
            break
        start = offset
    return ExpandedIdent(src, start, pos)


class StackLinkedList(Generic[T]):
    """An immutable stack stored as a linked list."""

    __slots__ = ("_node",)

    def __init__(self, node: tuple[T, StackLinkedList[T]] | None = None) -> None:
        self._node = node

    @classmethod
    def empty(cls) -> StackLinkedList[T]:
        return cls(None)

    def push(self, item: T) -> StackLinkedList[T]:
        """Return a new stack with ``item`` on top of this one."""
        return type(self)((item, self))

    def contains(self, item: T) -> bool:
        current = self
        while current._node is not None:
            top, previous = current._node
            if top == item:
                return True
            current = previous
        return False