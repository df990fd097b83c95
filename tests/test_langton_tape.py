import pytest

from automatas.langton.tape import Tape


@pytest.mark.parametrize("size", [(0, 3), (3, 0), (-1, 2)])
def test_non_positive_size_rejected(size):
    with pytest.raises(ValueError):
        Tape(*size)


def test_new_tape_is_all_white():
    tape = Tape(4, 3)
    assert all(tape.get(x, y) == 0 for x in range(4) for y in range(3))


def test_set_then_get():
    tape = Tape(3, 3)
    tape.set(2, 1, 1)
    assert tape.get(2, 1) == 1
    assert tape.get(1, 2) == 0


@pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (3, 0), (0, 2)])
def test_out_of_bounds_access_raises(pos):
    tape = Tape(3, 2)
    assert not tape.is_valid_position(*pos)
    with pytest.raises(IndexError):
        tape.get(*pos)
    with pytest.raises(IndexError):
        tape.set(*pos, 1)
    with pytest.raises(IndexError):
        tape.render_cell(*pos)


def test_corners_are_valid():
    tape = Tape(3, 2)
    assert all(tape.is_valid_position(x, y) for x, y in [(0, 0), (2, 0), (0, 1), (2, 1)])


def test_render_cell():
    tape = Tape(2, 1)
    tape.set(1, 0, 1)
    assert tape.render_cell(0, 0) == " "
    assert tape.render_cell(1, 0) == "X"


def test_load_cells_ignores_out_of_range_and_stops_at_garbage():
    tape = Tape(3, 3)
    tape.load_cells("0 0\n5 5\n2 1\nfoo bar\n1 1\n")
    assert tape.get(0, 0) == 1
    assert tape.get(2, 1) == 1
    assert tape.get(1, 1) == 0


def test_from_file(tmp_path):
    path = tmp_path / "cells.txt"
    path.write_text("1 0\n0 2\n", encoding="utf-8")
    tape = Tape.from_file(2, 3, path)
    assert tape.get(1, 0) == 1
    assert tape.get(0, 2) == 1
    assert sum(map(sum, tape.grid)) == 2


def test_from_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        Tape.from_file(2, 2, tmp_path / "missing.txt")


def test_save_writes_header_and_cells(tmp_path):
    tape = Tape(3, 2)
    tape.set(0, 0, 1)
    tape.set(2, 1, 1)
    path = tmp_path / "out.txt"
    tape.save(path, 1, 0, 2)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "3 2"
    assert lines[1] == "1 0 2"
    assert lines[2:] == ["0 0", "2 1"]


def test_saved_cells_load_back(tmp_path):
    tape = Tape(4, 4)
    tape.set(3, 0, 1)
    tape.set(1, 2, 1)
    path = tmp_path / "out.txt"
    tape.save(path, 0, 0, 0)
    body = "\n".join(path.read_text(encoding="utf-8").splitlines()[2:])
    other = Tape(4, 4)
    other.load_cells(body)
    assert other == tape