"""Compile, run and check small Rust exercises, with reference solutions."""

__version__ = "0.1.0"