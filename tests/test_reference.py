import pytest
from rowdb import Table, CellReference, parse_reference, resolve_reference, write_reference
from rowdb.errors import ColumnNotFound, InvalidReference


@pytest.mark.parametrize("token, column, row_index", [
    ("Name5", "Name", 4),
    ("A12", "A", 11),
    ("A1", "A", 0),
    ("B05", "B", 4),
    ("col_x9", "col_x", 8),
])
def test_parse_reference(token, column, row_index):
    ref = parse_reference(token)
    assert ref == CellReference(column, row_index)


@pytest.mark.parametrize("token", ["5", "Name", "Name0", "", "A1B", "A00"])
def test_parse_reference_rejects(token):
    with pytest.raises(InvalidReference):
        parse_reference(token)


def test_row_number_and_str():
    ref = parse_reference("Phone3")
    assert ref.row_number == 3
    assert str(ref) == "Phone3"


def test_resolve_unknown_column():
    t = Table('t', ['Name', 'Phone'])
    with pytest.raises(ColumnNotFound, match="Email"):
        resolve_reference(t, "Email1")
    assert t.row_count == 0


def test_resolve_is_case_sensitive():
    t = Table('t', ['Name'])
    with pytest.raises(ColumnNotFound):
        resolve_reference(t, "name1")


def test_resolve_expands_all_columns():
    t = Table('t', ['A', 'B', 'C'])
    t.add_row(['1', '2', '3'])
    t.add_row(['4', '5', '6'])
    ref = write_reference(t, "B5", "v")
    assert ref == CellReference('B', 4)
    assert t.row_count == 5
    assert [len(c) for c in t.columns()] == [5, 5, 5]
    for row in (2, 3, 4):
        for col in ('A', 'B', 'C'):
            if (col, row) == ('B', 4):
                continue
            assert t.get_cell(col, row) == ''
    assert t.get_cell('B', 4) == 'v'
    assert t.get_cell('A', 0) == '1'


def test_resolve_existing_row_does_not_expand():
    t = Table('t', ['A'])
    t.add_row(['1'])
    t.add_row(['2'])
    write_reference(t, "A1", "x")
    assert t.row_count == 2
    assert t.column('A').values() == ['x', '2']


def test_letter_reference_falls_back_to_column_position():
    t = Table('contacts', ['Name', 'Phone'])
    assert resolve_reference(t, "A1") == CellReference('Name', 0)
    assert resolve_reference(t, "B1") == CellReference('Phone', 0)
    with pytest.raises(ColumnNotFound):
        resolve_reference(t, "C1")


def test_exact_name_wins_over_letter_position():
    t = Table('t', ['X', 'A'])
    assert write_reference(t, "A1", "v") == CellReference('A', 0)
    assert t.get_cell('X', 0) == ''


def test_failed_resolution_leaves_table_untouched():
    t = Table('t', ['A'])
    for token in ("A0", "Missing3", "9"):
        with pytest.raises((InvalidReference, ColumnNotFound)):
            write_reference(t, token, "x")
    assert t.row_count == 0
