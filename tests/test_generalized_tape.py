import pytest

from automatas.generalized.tape import Color, Tape


def test_new_tape_is_white():
    tape = Tape(3, 2, 4)
    assert all(tape.get(x, y) == Color.WHITE for x in range(3) for y in range(2))


@pytest.mark.parametrize("size", [(0, 1), (1, 0), (-2, 3)])
def test_non_positive_size_rejected(size):
    with pytest.raises(ValueError):
        Tape(size[0], size[1], 2)


def test_too_few_colours_rejected():
    with pytest.raises(ValueError):
        Tape(2, 2, 1)


def test_set_wraps_values_into_colour_range():
    tape = Tape(2, 2, 4)
    tape.set(0, 0, 5)
    assert tape.get(0, 0) == 1
    tape.set(1, 1, -1)
    assert tape.get(1, 1) == 3


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (2, 0), (0, 2)])
def test_out_of_range_access_raises(x, y):
    tape = Tape(2, 2, 2)
    with pytest.raises(IndexError):
        tape.get(x, y)
    with pytest.raises(IndexError):
        tape.set(x, y, 1)
    with pytest.raises(IndexError):
        tape.render_cell(x, y)


def test_is_valid_position_bounds():
    tape = Tape(3, 2, 2)
    assert tape.is_valid_position(2, 1)
    assert not tape.is_valid_position(3, 1)
    assert not tape.is_valid_position(2, 2)


def test_render_cell_white_is_space():
    assert Tape(1, 1, 2).render_cell(0, 0) == " "


def test_render_cell_red_uses_ansi_background():
    tape = Tape(1, 1, 4)
    tape.set(0, 0, Color.RED)
    assert tape.render_cell(0, 0) == "\033[41m \033[0m"


def test_load_cells_ignores_out_of_bounds_and_stops_at_garbage():
    tape = Tape(3, 3, 4)
    tape.load_cells("0 0 2\n5 5 1\n2 1 3\nfoo 1 1\n1 1 1\n")
    assert tape.get(0, 0) == 2
    assert tape.get(2, 1) == 3
    assert tape.get(1, 1) == Color.WHITE


def test_from_file_reads_triples(tmp_path):
    path = tmp_path / "cells.txt"
    path.write_text("1 0 1\n0 1 3\n", encoding="utf-8")
    tape = Tape.from_file(2, 2, 4, path)
    assert tape.get(1, 0) == 1
    assert tape.get(0, 1) == 3
    assert tape.get(0, 0) == Color.WHITE


def test_save_writes_configuration_format(tmp_path):
    tape = Tape(3, 2, 4)
    tape.set(1, 0, 2)
    tape.set(0, 1, 1)
    path = tmp_path / "state.txt"
    tape.save(path, [("DI", 1, 1, 1), ("IIII", 0, 0, 3)])
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "3 2 4"
    assert lines[1] == "DI 1 1 > ; IIII 0 0 v"
    assert lines[2:] == ["1 0 2", "0 1 1"]


def test_save_then_load_cells_round_trip(tmp_path):
    tape = Tape(4, 3, 8)
    tape.set(3, 2, 7)
    tape.set(2, 0, 5)
    path = tmp_path / "state.txt"
    tape.save(path, [])
    cell_lines = path.read_text(encoding="utf-8").splitlines()[2:]
    copy = Tape(4, 3, 8)
    copy.load_cells("\n".join(cell_lines))
    assert copy.grid == tape.grid