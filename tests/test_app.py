import io
import random

import pytest

from tricircle.app import CircleApp, parse_int
from tricircle.editor import CircleEditor


def run_script(script, editor=None, seed=1):
    out = io.StringIO()
    app = CircleApp(io.StringIO(script), out, editor, delay=0, rng=random.Random(seed))
    status = app.run()
    return status, out.getvalue(), app


@pytest.mark.parametrize("text,expected", [("12", 12), (" -7 ", -7), ("+3", 3)])
def test_parse_int_valid(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "1.5", "4x"])
def test_parse_int_invalid(text):
    assert parse_int(text) is None


def test_press_and_list_points():
    status, out, _ = run_script("press 10 20\npoints\n")
    assert status == 0
    assert "(10, 20)" in out


def test_radius_is_clamped_in_output():
    _, out, app = run_script("radius 99\n")
    assert "radius 50 thickness 3" in out
    assert app.editor.point_radius == 50


def test_invalid_number_reported():
    _, out, app = run_script("press a b\n")
    assert "invalid number" in out
    assert app.editor.points == []


def test_collinear_message():
    _, out, app = run_script("press 100 100\npress 200 100\npress 300 100\n")
    assert "collinear" in out
    assert app.editor.points == []


def test_random_requires_circle():
    _, out, _ = run_script("press 1 1\nrandom\n")
    assert "create the circle" in out


def test_random_moves_points():
    editor = CircleEditor()
    _, out, app = run_script("press 200 100\npress 400 300\npress 150 350\nrandom\n", editor)
    assert "random move finished" in out or "collinear" in out
    for x, y in app.editor.points:
        assert 0 <= x <= 640 and 0 <= y <= 480


def test_quit_stops_processing():
    _, out, app = run_script("quit\npress 5 5\n")
    assert app.editor.points == []


def test_unknown_command():
    _, out, _ = run_script("frobnicate\n")
    assert "unknown command: frobnicate" in out


def test_save_writes_pgm(tmp_path):
    target = tmp_path / "out.pgm"
    _, out, app = run_script(f"press 50 50\nsave {target}\n")
    assert target.read_bytes() == app.editor.image.to_pgm()
    assert target.read_bytes().startswith(b"P5\n640 480\n255\n")