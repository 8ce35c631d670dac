"""Textual helpers for completion and navigation tooling over Rust source."""

__version__ = "0.1.0"