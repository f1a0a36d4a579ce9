class RowDBError(Exception):
	"""Base exception for rowdb."""

	def __str__(self):
		# KeyError subclasses would otherwise repr() their message
		return str(self.args[0]) if self.args else self.__class__.__name__


class DimensionMismatch(RowDBError, ValueError):
	"""Raised when a row's value count differs from the table's column count."""
	pass


class ColumnNotFound(RowDBError, KeyError):
	"""Raised when a column name is not in the table."""
	pass


class TableNotFound(RowDBError, KeyError):
	"""Raised when a table name is not in the registry."""
	pass


class TableAlreadyExists(RowDBError, ValueError):
	"""Raised when creating a table under a name that is already taken."""
	pass


class NoTableSelected(RowDBError, LookupError):
	"""Raised when an operation needs a current table and none is set."""
	pass


class InvalidReference(RowDBError, ValueError):
	"""Raised for malformed cell references (no column, no row, row zero)."""
	pass


class FileNotFound(RowDBError, FileNotFoundError):
	"""Raised when neither a path nor its extension fallback exists.

	``paths`` holds every path that was tried, in order.
	"""

	def __init__(self, message, paths=()):
		super().__init__(message)
		self.paths = tuple(paths)


class FormatError(RowDBError, ValueError):
	"""Raised for structural violations in persisted table text.

	``row`` is the 0-based data row at fault, or None for header problems.
	"""

	def __init__(self, message, row=None):
		super().__init__(message)
		self.row = row


class TableIOError(RowDBError, OSError):
	"""Raised when reading or writing a table file fails."""
	pass
