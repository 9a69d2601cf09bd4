"""Consolidate Solidity sources into a single comment-free file."""

__version__ = "1.0.0"
