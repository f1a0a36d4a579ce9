import logging
import re
import warnings
from typing import Dict, Iterator, List

from .column import Column
from .config import COLUMNS_PREFIX, DATA_MARKER, DELIMITER, ROWS_PREFIX, TABLE_PREFIX
from .errors import ColumnNotFound, DimensionMismatch, FormatError

logger = logging.getLogger(__name__)

_ROW_COUNT = re.compile(r'[0-9]+')


def _missing_col_error(name, context="Table"):
	return ColumnNotFound(f"Column not found: {name} (in {context})")


def _split_fields(line) -> List[str]:
	"""Split a persisted line on the delimiter, trimming each field."""
	return [field.strip() for field in line.split(DELIMITER)]


def _is_lossy(text) -> bool:
	return DELIMITER in text or '\n' in text or '\r' in text


class Table:
	""" Named collection of equal-length text columns with a fixed display order """

	def __init__(self, name, columns=()):
		self._name = name
		self._columns: Dict[str, Column] = {}
		# Source of truth for display and serialization order
		self._column_order: List[str] = []
		for col_name in columns:
			self.add_column(col_name)

	@property
	def name(self) -> str:
		return self._name

	@property
	def row_count(self) -> int:
		"""Length of the first column; 0 when the table has no columns.

		Only meaningful while all columns have equal length, which add_row and
		reference writes maintain but direct set_cell growth does not.
		"""
		for column in self._columns.values():
			return len(column)
		return 0

	def __len__(self):
		return self.row_count

	def __contains__(self, col_name):
		return col_name in self._columns

	def __eq__(self, other):
		if not isinstance(other, Table):
			return NotImplemented
		if self._name != other._name or self._column_order != other._column_order:
			return False
		return all(self._columns[n] == other._columns[n] for n in self._column_order)

	def __repr__(self):
		return f"Table({self._name!r}, columns={self._column_order!r}, rows={self.row_count})"

	def __str__(self):
		from .display import render_table
		return render_table(self)

	def column_names(self) -> List[str]:
		return list(self._column_order)

	def column(self, col_name) -> Column:
		try:
			return self._columns[col_name]
		except KeyError:
			raise _missing_col_error(col_name, f"table '{self._name}'") from None

	def columns(self) -> List[Column]:
		"""Columns in display order."""
		return [self._columns[n] for n in self._column_order]

	def add_column(self, col_name):
		"""Append an empty column; no-op if the name is already present.

		Existing rows are padded so the new column matches the row count.
		"""
		if col_name in self._columns:
			return
		column = Column(col_name)
		column.extend_to(self.row_count)
		self._columns[col_name] = column
		self._column_order.append(col_name)

	def remove_column(self, col_name):
		if col_name not in self._columns:
			return
		del self._columns[col_name]
		self._column_order.remove(col_name)

	def add_row(self, values):
		"""Append one value to every column, in column order."""
		values = list(values)
		if len(values) != len(self._column_order):
			raise DimensionMismatch(
				f"Number of values ({len(values)}) doesn't match number of columns ({len(self._column_order)})"
			)
		for col_name, value in zip(self._column_order, values):
			self._columns[col_name].append(value)

	def get_cell(self, col_name, row_index) -> str:
		"""Read-safe: unknown columns and out-of-range rows read as ''."""
		column = self._columns.get(col_name)
		if column is None:
			return ""
		return column.value(row_index)

	def set_cell(self, col_name, row_index, value):
		"""Write one cell. Grows only the target column when ``row_index`` is past its end."""
		self.column(col_name).set_value(row_index, value)

	def rows(self) -> Iterator[List[str]]:
		"""Yield each row as a list of values in column order."""
		columns = self.columns()
		for i in range(self.row_count):
			yield [col.value(i) for col in columns]

	# ------------------------------------------------------------
	# Flat-file codec
	# ------------------------------------------------------------

	def serialize(self) -> str:
		"""Render the table in the line-oriented .odt text format.

		The delimiter is never escaped: values containing it (or a line break)
		are written as-is and will not survive a reload.
		"""
		lines = [
			f"{TABLE_PREFIX}{self._name}",
			COLUMNS_PREFIX + DELIMITER.join(self._column_order),
			f"{ROWS_PREFIX}{self.row_count}",
			DATA_MARKER,
		]
		lossy = [n for n in self._column_order if _is_lossy(n)]
		for row in self.rows():
			lossy.extend(v for v in row if _is_lossy(v))
			lines.append(DELIMITER.join(row))
		if lossy:
			msg = (f"Table '{self._name}' has {len(lossy)} value(s) containing "
				   f"'{DELIMITER}' or a line break; they will not load back unchanged")
			logger.warning(msg)
			warnings.warn(msg)
		return "\n".join(lines) + "\n"

	@classmethod
	def deserialize(cls, text) -> "Table":
		"""Rebuild a Table from text produced by ``serialize``.

		Raises FormatError for a missing/malformed header or any data row whose
		field count differs from the declared column count.
		"""
		# Split on '\n' only; other separators splitlines() knows may sit inside values
		lines = [line.rstrip('\r') for line in text.split('\n')]
		if lines and lines[-1] == "":
			lines.pop()

		def header(index, prefix):
			if index >= len(lines) or not lines[index].startswith(prefix):
				raise FormatError(f"Invalid file format: missing {prefix.rstrip(':')} header")
			return lines[index][len(prefix):]

		table_name = header(0, TABLE_PREFIX)
		if not table_name.strip():
			raise FormatError("Invalid file format: empty table name")

		columns_text = header(1, COLUMNS_PREFIX)
		col_names = _split_fields(columns_text) if columns_text.strip() else []
		if len(set(col_names)) != len(col_names):
			raise FormatError(f"Invalid file format: duplicate column names in {columns_text!r}")

		rows_text = header(2, ROWS_PREFIX).strip()
		if not _ROW_COUNT.fullmatch(rows_text):
			raise FormatError(f"Invalid file format: bad row count {rows_text!r}")
		row_count = int(rows_text)

		# DATA: marker is skipped, not parsed
		if len(lines) < 4:
			raise FormatError("Invalid file format: missing DATA marker")

		table = cls(table_name, col_names)
		data = lines[4:]
		for i in range(row_count):
			if i >= len(data):
				raise FormatError(f"incorrect syntax in row {i}: expected {row_count} rows, found {len(data)}", row=i)
			values = _split_fields(data[i])
			if len(values) != len(col_names):
				raise FormatError(
					f"incorrect syntax in row {i}: expected {len(col_names)} fields, found {len(values)}", row=i
				)
			table.add_row(values)

		logger.debug(f"Deserialized table '{table_name}' ({len(col_names)} columns, {row_count} rows)")
		return table
