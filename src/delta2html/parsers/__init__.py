#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers producing DeltaInsertOp sequences from raw input."""

from delta2html.parsers.delta import (
    convert_insert_value,
    denormalize_insert_op,
    is_delta_insert_op,
    load_delta_json,
    parse_delta,
    tokenize_with_newlines,
)

__all__ = [
    "convert_insert_value",
    "denormalize_insert_op",
    "is_delta_insert_op",
    "load_delta_json",
    "parse_delta",
    "tokenize_with_newlines",
]
