"""Spreadsheet-style cell references ("Name5", "A12") and row expansion."""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from typing import Optional

from .errors import ColumnNotFound, InvalidReference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellReference:
	"""A validated (column, row) coordinate; ``row_index`` is 0-based."""
	column: str
	row_index: int

	@property
	def row_number(self) -> int:
		"""1-based row number as the user wrote it."""
		return self.row_index + 1

	def __str__(self):
		return f"{self.column}{self.row_number}"


def parse_reference(token: str) -> CellReference:
	"""Split ``token`` at its first digit into a column name and a 1-based row.

	Rules:
	- Everything before the first ASCII digit is the column name (must be non-empty)
	- Everything from that digit on is the row number (digits only, not zero)
	"""
	split_at = next((i for i, ch in enumerate(token) if ch in string.digits), len(token))
	col_name, row_text = token[:split_at], token[split_at:]

	if not col_name or not row_text:
		raise InvalidReference(f"Invalid cell reference: {token}")
	if not all(ch in string.digits for ch in row_text):
		raise InvalidReference(f"Invalid row number: {row_text}")

	row_number = int(row_text)
	if row_number == 0:
		raise InvalidReference(f"Invalid row number: {row_text} (rows start at 1)")
	return CellReference(col_name, row_number - 1)


def _letter_index(letters: str) -> Optional[int]:
	"""'A' -> 0, 'Z' -> 25, 'AA' -> 26; None unless all uppercase ASCII letters."""
	if not letters or not all(ch in string.ascii_uppercase for ch in letters):
		return None
	index = 0
	for ch in letters:
		index = index * 26 + (ord(ch) - ord('A') + 1)
	return index - 1


def _match_column(table, col_name: str) -> str:
	names = table.column_names()
	if col_name in names:
		return col_name
	index = _letter_index(col_name)
	if index is not None and index < len(names):
		return names[index]
	raise ColumnNotFound(f"Column not found: {col_name}")


def resolve_reference(table, token: str) -> CellReference:
	"""Validate ``token`` against ``table`` and make its row addressable.

	Missing rows are appended as all-empty rows through ``add_row`` so every
	column grows together.
	"""
	ref = parse_reference(token)
	col_name = _match_column(table, ref.column)

	added = 0
	while ref.row_index >= table.row_count:
		table.add_row([""] * len(table.column_names()))
		added += 1
	if added:
		logger.debug(f"Expanded table '{table.name}' by {added} row(s) for {token}")

	return CellReference(col_name, ref.row_index)


def write_reference(table, token: str, value) -> CellReference:
	"""Resolve ``token`` and store ``value`` there."""
	ref = resolve_reference(table, token)
	table.set_cell(ref.column, ref.row_index, value)
	return ref
