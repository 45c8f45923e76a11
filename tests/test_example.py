import io
import json

from jsonx.example import SAMPLE_INPUT, main, run_example
from jsonx.version import get_version_string


def _run():
    stream = io.StringIO()
    ok = run_example(stream)
    return ok, stream.getvalue().splitlines()


def test_run_succeeds():
    ok, lines = _run()
    assert ok is True
    assert lines[0] == get_version_string()


def test_minified_output_matches_initial_data():
    _, lines = _run()
    prefix = "Minified JSON: "
    minified = [line for line in lines if line.startswith(prefix)]
    assert len(minified) == 1
    assert json.loads(minified[0][len(prefix):]) == {"name": "Adam", "position": [12, 34]}


def test_formatted_output_is_multiline_and_equivalent():
    ok, lines = _run()
    assert ok
    start = lines.index(next(l for l in lines if l.startswith("Formatted JSON: ")))
    end = next(i for i, l in enumerate(lines) if l.startswith("Minified JSON: "))
    text = "\n".join(lines[start:end])[len("Formatted JSON: "):]
    assert end - start > 1
    assert json.loads(text) == {"name": "Adam", "position": [12, 34]}


def test_parsed_values_reported():
    _, lines = _run()
    expected = json.loads(SAMPLE_INPUT)
    assert f"test_struct.name = {expected['name']}" in lines
    assert f"test_struct.coords[0] = {expected['position'][0]}" in lines
    assert f"test_struct.coords[1] = {expected['position'][1]}" in lines


def test_dump_shows_updated_elements():
    _, lines = _run()
    assert '[00] name (updated): "Eve"' in lines
    assert "[01] position (updated): [nested 2 elements]" in lines


def test_main_returns_zero(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith(get_version_string())
    assert "test_struct.name = Eve" in out