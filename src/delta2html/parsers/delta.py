#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/parsers/delta.py
"""Delta intake: turn raw JSON-like delta operations into DeltaInsertOps.

The grouping engine assumes a well-formed op sequence. This module is the
boundary that guarantees it:

- ops that are not ``{"insert": str | mapping, "attributes"?: mapping}`` are
  dropped,
- text inserts containing newlines are split so every newline is its own op,
- insert values become typed payloads and attributes are sanitized.

"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Mapping, Optional

from delta2html.ast.ops import DeltaInsertOp, InsertData, InsertDataCustom, InsertDataQuill
from delta2html.constants import NEWLINE, DataType
from delta2html.exceptions import ParsingError
from delta2html.options.sanitize import SanitizeOptions
from delta2html.utils.sanitize import sanitize_attributes, sanitize_url

logger = logging.getLogger(__name__)


def is_delta_insert_op(value: Any) -> bool:
    """Return True if ``value`` has the shape of a raw insert op."""
    if not isinstance(value, Mapping):
        return False
    insert = value.get("insert")
    if not isinstance(insert, (str, Mapping)):
        return False
    attributes = value.get("attributes")
    return attributes is None or isinstance(attributes, Mapping)


def tokenize_with_newlines(text: str) -> list[str]:
    """Split on newlines, keeping every newline as its own token.

    Examples
    --------
    >>> tokenize_with_newlines("hello\\n\\nworld\\n ")
    ['hello', '\\n', '\\n', 'world', '\\n', ' ']

    """
    if text == NEWLINE:
        return [text]

    lines = text.split(NEWLINE)
    if len(lines) == 1:
        return lines

    tokens: list[str] = []
    last_index = len(lines) - 1
    for index, line in enumerate(lines):
        if line:
            tokens.append(line)
        if index != last_index:
            tokens.append(NEWLINE)
    return tokens


def denormalize_insert_op(raw_op: Mapping[str, Any]) -> list[Mapping[str, Any]]:
    """Split a raw text insert containing newlines into one op per token.

    Every resulting op keeps the original attributes. Embeds and a lone
    newline are returned unchanged.

    Examples
    --------
    >>> denormalize_insert_op({"insert": "a\\nb", "attributes": {"bold": True}})
    [{'insert': 'a', 'attributes': {'bold': True}}, {'insert': '\\n', 'attributes': {'bold': True}}, \
{'insert': 'b', 'attributes': {'bold': True}}]

    """
    insert = raw_op["insert"]
    if not isinstance(insert, str) or insert == NEWLINE:
        return [raw_op]

    tokens = tokenize_with_newlines(insert)
    if len(tokens) == 1:
        return [raw_op]

    return [{**raw_op, "insert": token} for token in tokens]


def convert_insert_value(insert: Any, options: Optional[SanitizeOptions] = None) -> Optional[InsertData]:
    """Convert a raw insert value into a typed payload.

    Parameters
    ----------
    insert : str or mapping
        The raw ``insert`` value
    options : SanitizeOptions, optional
        Used to sanitize image and video URLs

    Returns
    -------
    InsertData or None
        None for an empty mapping, which carries no content

    """
    if isinstance(insert, str):
        return InsertDataQuill(DataType.TEXT, insert)

    if not insert:
        return None

    if DataType.IMAGE.value in insert:
        return InsertDataQuill(DataType.IMAGE, sanitize_url(str(insert[DataType.IMAGE.value]), options))
    if DataType.VIDEO.value in insert:
        return InsertDataQuill(DataType.VIDEO, sanitize_url(str(insert[DataType.VIDEO.value]), options))
    if DataType.FORMULA.value in insert:
        return InsertDataQuill(DataType.FORMULA, str(insert[DataType.FORMULA.value]))

    custom_type = next(iter(insert))
    return InsertDataCustom(custom_type, insert[custom_type])


def _extract_ops(delta: Any) -> Iterable[Any]:
    if isinstance(delta, Mapping):
        ops = delta.get("ops")
        if isinstance(ops, list):
            return ops
        raise ParsingError("Delta mapping must have an 'ops' list")
    if isinstance(delta, (list, tuple)):
        return delta
    raise ParsingError(f"Expected a delta mapping or a list of ops, got {type(delta).__name__}")


def parse_delta(delta: Any, options: Optional[SanitizeOptions] = None) -> tuple[DeltaInsertOp, ...]:
    """Build the op sequence consumed by the grouping engine.

    Parameters
    ----------
    delta : list or mapping
        Either a list of raw ops or a mapping with an ``ops`` list
    options : SanitizeOptions, optional
        Sanitization options

    Returns
    -------
    tuple of DeltaInsertOp
        Well-formed, denormalized, sanitized operations

    Raises
    ------
    ParsingError
        If ``delta`` is neither a list nor a mapping holding an ``ops`` list

    """
    options = options or SanitizeOptions()
    result: list[DeltaInsertOp] = []
    dropped = 0

    for raw_op in _extract_ops(delta):
        if not is_delta_insert_op(raw_op):
            dropped += 1
            continue
        for part in denormalize_insert_op(raw_op):
            insert_value = convert_insert_value(part["insert"], options)
            if insert_value is None:
                dropped += 1
                continue
            attributes = part.get("attributes")
            result.append(
                DeltaInsertOp(insert_value, sanitize_attributes(attributes, options) if attributes else {})
            )

    if dropped:
        logger.debug("Dropped %d malformed or empty ops", dropped)
    return tuple(result)


def load_delta_json(text: str) -> Any:
    """Decode delta JSON text.

    Raises
    ------
    ParsingError
        If the text is not valid JSON

    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid delta JSON: {e}", original_error=e) from e
