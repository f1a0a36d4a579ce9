"""
rowdb: a small console manager for personal text tables

Tables are named, ordered sets of text columns. Cells are edited by
spreadsheet-style references ("Name5", "A12") and tables persist to a
line-oriented .odt flat file.

Main classes:
	- Table: named columns of equal length, with serialize/deserialize
	- Column / Cell: the storage a Table is made of
	- TableRegistry: the loaded/created tables plus the current one
	- CellReference: a parsed, validated cell reference

Zero external dependencies - pure Python stdlib only.
"""

__version__ = "1.0.0"

from .column import Cell, Column
from .table import Table
from .reference import CellReference, parse_reference, resolve_reference, write_reference
from .registry import TableRegistry
from .display import render_table
from .errors import (
	RowDBError,
	DimensionMismatch,
	ColumnNotFound,
	TableNotFound,
	TableAlreadyExists,
	NoTableSelected,
	InvalidReference,
	FileNotFound,
	FormatError,
	TableIOError,
)

__all__ = [
	"Cell",
	"Column",
	"Table",
	"CellReference",
	"parse_reference",
	"resolve_reference",
	"write_reference",
	"TableRegistry",
	"render_table",
	"RowDBError",
	"DimensionMismatch",
	"ColumnNotFound",
	"TableNotFound",
	"TableAlreadyExists",
	"NoTableSelected",
	"InvalidReference",
	"FileNotFound",
	"FormatError",
	"TableIOError",
]
