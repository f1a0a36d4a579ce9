"""
Table Registry
==============
Owns every table created or loaded during a session and tracks which one is
current. The current table is remembered by name, so replacing a table
(loading a file with the same table name) keeps the designation valid.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional

from .config import DEFAULT_EXTENSION
from .display import render_table
from .errors import NoTableSelected, TableAlreadyExists, TableNotFound
from .reference import CellReference, write_reference
from .storage import read_table, write_table
from .table import Table

logger = logging.getLogger(__name__)


class TableRegistry:
	""" Catalog of tables keyed by name, plus the current-table designation """

	def __init__(self, extension: str = DEFAULT_EXTENSION, encoding: Optional[str] = None):
		self._tables: Dict[str, Table] = {}
		self._current: Optional[str] = None
		self.extension = extension
		self.encoding = encoding

	def __len__(self):
		return len(self._tables)

	def __contains__(self, name):
		return name in self._tables

	def __iter__(self) -> Iterator[Table]:
		return iter(self._tables.values())

	# ------------------------------------------------------------
	# Current table
	# ------------------------------------------------------------

	@property
	def current(self) -> Optional[Table]:
		if self._current is None:
			return None
		return self._tables[self._current]

	@property
	def current_name(self) -> str:
		"""Name of the current table, or '' when none is selected."""
		return self._current or ""

	def has_current(self) -> bool:
		return self._current is not None

	def require_current(self) -> Table:
		table = self.current
		if table is None:
			raise NoTableSelected("No table selected")
		return table

	def _install(self, table: Table) -> Table:
		self._tables[table.name] = table
		self._current = table.name
		return table

	# ------------------------------------------------------------
	# Catalog operations
	# ------------------------------------------------------------

	def get_table(self, name: str) -> Table:
		try:
			return self._tables[name]
		except KeyError:
			raise TableNotFound(f"Table not found: {name}") from None

	def create_table(self, name: str, column_names: Iterable[str]) -> Table:
		if name in self._tables:
			raise TableAlreadyExists(f"Table already exists: {name}")
		table = self._install(Table(name, column_names))
		logger.info(f"Created table '{name}' with columns {table.column_names()}")
		return table

	def load_table(self, path: str) -> Table:
		"""Load ``path`` (or ``path`` + extension) and make it current.

		A table with the same name is replaced.
		"""
		table, actual = read_table(path, extension=self.extension, encoding=self.encoding)
		if table.name in self._tables:
			logger.info(f"Replacing table '{table.name}' with the copy from '{actual}'")
		self._install(table)
		logger.info(f"Loaded table '{table.name}' from '{actual}' ({table.row_count} rows)")
		return table

	def save_table(self, path: str) -> Table:
		table = self.require_current()
		write_table(table, path, encoding=self.encoding)
		logger.info(f"Saved table '{table.name}' to '{path}'")
		return table

	def select_table(self, name: str) -> Table:
		table = self.get_table(name)
		self._current = name
		logger.info(f"Selected table '{name}'")
		return table

	def list_tables(self) -> List[str]:
		return sorted(table.name for table in self)

	# ------------------------------------------------------------
	# Current-table operations
	# ------------------------------------------------------------

	def edit_cell(self, ref: str, value: str) -> CellReference:
		return write_reference(self.require_current(), ref, value)

	def add_row(self, values: Iterable[str]) -> Table:
		table = self.require_current()
		table.add_row(values)
		return table

	def add_column(self, name: str) -> Table:
		table = self.require_current()
		table.add_column(name)
		return table

	def remove_column(self, name: str) -> Table:
		"""Drop a column of the current table; unlike Table.remove_column, absence is an error."""
		table = self.require_current()
		table.column(name)
		table.remove_column(name)
		return table

	def view(self) -> str:
		return render_table(self.require_current())
