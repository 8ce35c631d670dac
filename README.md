# rustsense

Small, dependency-free building blocks for tools that complete and navigate
Rust source code. The package works on plain strings and UTF-8 byte offsets;
it does not parse Rust fully, but answers the quick textual questions a
completion engine asks over and over.

## Installation

```
pip install rustsense
```

## What is inside

- `rustsense.core`: `SearchType` (`EXACT_MATCH` or `STARTS_WITH`) and
  `ByteRange`, a half-open byte range with `shift()` and `to_slice()`.
- `rustsense.textutil`: identifier helpers such as `txt_matches`,
  `txt_matches_with_pos`, `symbol_matches`, `find_ident_end`, `char_before`,
  `char_at` and `expand_ident` (which returns an `ExpandedIdent`);
  closure detection with `find_closure` and `closure_valid_arg_scope`;
  visibility and keyword stripping with `strip_visibility`, `strip_word`,
  `strip_words` and `trim_visibility`; plus `in_fn_name`,
  `calculate_str_hash`, `gen_tuple_fields` and the `StackLinkedList`
  persistent stack.
- `rustsense.srcpath`: `get_rust_src_path()` finds the standard library
  sources from the `RUST_SRC_PATH` environment variable, then the sysroot
  reported by `rustc --print sysroot`, then `/usr/local/src/rust/src` and
  `/usr/src/rust/src`. It raises a `RustSrcPathError` subclass
  (`RustSrcPathMissing`, `RustSrcPathDoesNotExist`, `NotRustSourceTree`)
  when it cannot. `validate_rust_src_path` and `check_rust_sysroot` are
  available on their own.
- `rustsense.tmpfiles`: `TmpDir`, `TmpFile`, `tmpname` and
  `get_pos_and_source` for setting up throwaway source trees, with a `~`
  marking the cursor position.
- `rustsense.typeinf`: item-header helpers `generate_skeleton_for_parsing`,
  `first_param_is_self` and `find_closing_paren`, and `get_operator_trait`,
  which maps a `BinOpKind` to the name of its operator trait (`"bool"` for
  comparisons).

## Examples

```python
from rustsense.core import SearchType
from rustsense.textutil import txt_matches, trim_visibility, find_closure
from rustsense.typeinf import generate_skeleton_for_parsing, first_param_is_self

txt_matches(SearchType.STARTS_WITH, "do_st", "pub fn do_stuff")  # True
trim_visibility("pub(crate)   struct")                         # "struct"
generate_skeleton_for_parsing("mod foo { blah }")              # "mod foo {}"
first_param_is_self("pub fn map<U, F: FnOnce(T) -> U>(self, f: F)")  # True

pipes, body = find_closure("|a, b, c| { something() }")
```

```python
from rustsense.srcpath import get_rust_src_path, RustSrcPathError

try:
    print(get_rust_src_path())
except RustSrcPathError as err:
    print(err)
```

```python
from rustsense.tmpfiles import TmpDir, get_pos_and_source

point, clean = get_pos_and_source("let b = ap~")
with TmpDir() as tmp:
    src_file = tmp.write_file("src.rs", clean)
    print(src_file.path(), point)
```

## What it does not do

This package is a set of helpers, not a completion engine. It has no Rust
parser, no name resolution, no type inference beyond the text helpers in
`rustsense.typeinf`, and no command-line tool or server: it cannot by itself
complete an identifier or find a definition in a Rust project.

## Running the tests

```
pip install -e ".[test]"
pytest
```