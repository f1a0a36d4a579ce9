"""
Table structure: columns, rows, cell access and the two growth paths.
"""

import pytest
from rowdb import Table
from rowdb.errors import ColumnNotFound, DimensionMismatch


class TestColumns:
	"""Adding and removing columns."""

	def test_columns_keep_insertion_order(self):
		t = Table('t', ['b', 'a', 'c'])
		assert t.column_names() == ['b', 'a', 'c']

	def test_add_column_is_idempotent(self):
		t = Table('t', ['a'])
		t.add_row(['1'])
		t.add_column('a')
		assert t.column_names() == ['a']
		assert t.get_cell('a', 0) == '1'

	def test_add_column_pads_existing_rows(self):
		t = Table('t', ['a'])
		t.add_row(['1'])
		t.add_row(['2'])
		t.add_column('b')
		assert t.column('b').values() == ['', '']
		assert t.row_count == 2

	def test_remove_column_drops_order_and_mapping(self):
		t = Table('t', ['a', 'b'])
		t.remove_column('a')
		assert t.column_names() == ['b']
		assert 'a' not in t
		with pytest.raises(ColumnNotFound):
			t.column('a')

	def test_remove_missing_column_is_noop(self):
		t = Table('t', ['a'])
		t.remove_column('zzz')
		assert t.column_names() == ['a']

	def test_column_lookup_is_case_sensitive(self):
		t = Table('t', ['Name'])
		assert 'Name' in t
		assert 'name' not in t


class TestAddRow:
	"""add_row appends to every column or to none."""

	def test_add_row_grows_every_column(self):
		t = Table('t', ['a', 'b'])
		t.add_row(['1', '2'])
		assert t.row_count == 1
		assert t.get_cell('a', 0) == '1'
		assert t.get_cell('b', 0) == '2'

	def test_add_row_mismatch_leaves_table_untouched(self):
		t = Table('t', ['a', 'b'])
		t.add_row(['1', '2'])
		with pytest.raises(DimensionMismatch, match="doesn't match"):
			t.add_row(['1', '2', '3'])
		with pytest.raises(DimensionMismatch):
			t.add_row(['1'])
		assert t.row_count == 1
		assert [len(c) for c in t.columns()] == [1, 1]

	def test_add_row_accepts_generators(self):
		t = Table('t', ['a', 'b'])
		t.add_row(v for v in ['x', 'y'])
		assert list(t.rows()) == [['x', 'y']]


class TestCellAccess:
	"""get_cell is read-safe; set_cell grows only its own column."""

	def test_get_cell_unknown_column_reads_empty(self):
		t = Table('t', ['a'])
		assert t.get_cell('nope', 0) == ''

	def test_get_cell_out_of_range_reads_empty(self):
		t = Table('t', ['a'])
		t.add_row(['1'])
		assert t.get_cell('a', 99) == ''
		assert t.row_count == 1

	def test_set_cell_unknown_column_raises(self):
		t = Table('t', ['a'])
		with pytest.raises(ColumnNotFound, match="nope"):
			t.set_cell('nope', 0, 'x')

	def test_set_cell_overwrites(self):
		t = Table('t', ['a'])
		t.add_row(['1'])
		t.set_cell('a', 0, 'changed')
		assert t.get_cell('a', 0) == 'changed'

	def test_set_cell_past_end_grows_only_target_column(self):
		t = Table('t', ['a', 'b'])
		t.add_row(['1', '2'])
		t.set_cell('b', 3, 'x')
		assert len(t.column('a')) == 1
		assert t.column('b').values() == ['2', '', '', 'x']
		# row_count follows the first column
		assert t.row_count == 1


class TestRowCount:

	def test_empty_table_has_zero_rows(self):
		assert Table('t').row_count == 0
		assert len(Table('t', ['a'])) == 0

	def test_row_count_after_removing_first_column(self):
		t = Table('t', ['a', 'b'])
		t.add_row(['1', '2'])
		t.remove_column('a')
		assert t.row_count == 1


class TestEquality:

	def test_equal_tables(self):
		a = Table('t', ['x', 'y'])
		b = Table('t', ['x', 'y'])
		a.add_row(['1', '2'])
		b.add_row(['1', '2'])
		assert a == b

	def test_column_order_matters(self):
		assert Table('t', ['x', 'y']) != Table('t', ['y', 'x'])

	def test_name_matters(self):
		assert Table('t', ['x']) != Table('u', ['x'])

	def test_values_matter(self):
		a = Table('t', ['x'])
		b = Table('t', ['x'])
		a.add_row(['1'])
		b.add_row(['2'])
		assert a != b

	def test_repr(self):
		t = Table('contacts', ['Name'])
		assert repr(t) == "Table('contacts', columns=['Name'], rows=0)"
