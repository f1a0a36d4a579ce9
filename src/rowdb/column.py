from typing import Iterator, List


class Cell:
	""" A single opaque text value """
	__slots__ = ('_value',)

	def __init__(self, value=""):
		self._value = value

	@property
	def value(self) -> str:
		return self._value

	def set_value(self, value):
		self._value = value

	def __eq__(self, other):
		if isinstance(other, Cell):
			return self._value == other._value
		return NotImplemented

	def __str__(self):
		return self._value

	def __repr__(self):
		return f"Cell({self._value!r})"


class Column:
	""" Named, 0-indexed sequence of Cells that grows on write access """

	def __init__(self, name, values=()):
		self._name = name
		self._cells: List[Cell] = [Cell(v) for v in values]

	@property
	def name(self) -> str:
		return self._name

	def __len__(self):
		return len(self._cells)

	def __iter__(self) -> Iterator[str]:
		""" iterate over the cell values """
		return (cell.value for cell in self._cells)

	def __getitem__(self, index):
		"""Read-safe access: out-of-range indices yield an empty Cell."""
		if 0 <= index < len(self._cells):
			return self._cells[index]
		# Fresh each time; Cells are never shared between columns
		return Cell()

	def __eq__(self, other):
		if isinstance(other, Column):
			return self._name == other._name and self.values() == other.values()
		return NotImplemented

	def __repr__(self):
		return f"Column({self._name!r}, {self.values()!r})"

	def values(self) -> List[str]:
		return [cell.value for cell in self._cells]

	def value(self, index) -> str:
		return self[index].value

	def cell(self, index) -> Cell:
		"""Writable access: grows the column with empty Cells up to ``index``."""
		if index < 0:
			raise IndexError(f"Row index must be non-negative, got {index}")
		if index >= len(self._cells):
			self._cells.extend(Cell() for _ in range(index + 1 - len(self._cells)))
		return self._cells[index]

	def set_value(self, index, value):
		self.cell(index).set_value(value)

	def append(self, value):
		self._cells.append(Cell(value))

	def extend_to(self, length):
		"""Pad with empty Cells until the column holds ``length`` cells."""
		if length > len(self._cells):
			self.cell(length - 1)

	def remove_cell(self, index):
		"""Drop the cell at ``index``; later cells shift down. No-op when out of range."""
		if 0 <= index < len(self._cells):
			del self._cells[index]
