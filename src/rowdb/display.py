"""Boxed ASCII rendering of a Table."""

from __future__ import annotations
from typing import List


EMPTY_TABLE = "Table is empty."
ROW_NUMBER_HEADER = "#"


def _column_widths(headers: List[str], body: List[List[str]]) -> List[int]:
	"""Width per column: the longest of its header and every value."""
	widths = [len(h) for h in headers]
	for row in body:
		for c, value in enumerate(row):
			if len(value) > widths[c]:
				widths[c] = len(value)
	return widths


def _rule(widths: List[int]) -> str:
	return "+" + "+".join("-" * (w + 2) for w in widths) + "+"


def _line(cells: List[str], widths: List[int]) -> str:
	"""All cells left-aligned, padded by one space on each side."""
	return "|" + "|".join(f" {cell.ljust(w)} " for cell, w in zip(cells, widths)) + "|"


def render_table(table) -> str:
	"""Render ``table`` with a 1-based row number column.

	+---+------+-------+
	| # | Name | Phone |
	+---+------+-------+
	| 1 | John | 555   |
	+---+------+-------+
	"""
	headers = table.column_names()
	if not headers:
		return EMPTY_TABLE

	body = [[str(i + 1)] + row for i, row in enumerate(table.rows())]
	widths = _column_widths([ROW_NUMBER_HEADER] + headers, body)

	rule = _rule(widths)
	lines = [rule, _line([ROW_NUMBER_HEADER] + headers, widths), rule]
	lines.extend(_line(row, widths) for row in body)
	lines.append(rule)
	return "\n".join(lines)
