"""
Count Command Tests
===================

This module contains tests for the count and encodings commands.

Test Verification Strategy
-------------------------
- Drive the commands through CliRunner with a fake tokenizer
- Verify totals, the per-item report and file output
- Verify malformed input and bad configuration abort with a red message
"""

import json
from click.testing import CliRunner
from token_estimator import cli


def _write(path, content):
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_count_single_file(temp_dir):
    """A plain text file is counted as one text."""
    path = _write(temp_dir / "notes.txt", "one two three")

    result = CliRunner().invoke(cli, ['count', '--model', 'gpt-4', path])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == '3'


def test_count_multiple_files(temp_dir):
    first = _write(temp_dir / "a.txt", "one two")
    second = _write(temp_dir / "b.txt", "three four five")

    result = CliRunner().invoke(cli, ['count', '--model', 'gpt-4', first, second])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == '5'


def test_count_stdin():
    result = CliRunner().invoke(cli, ['count', '--model', 'gpt-4'], input='alpha beta')

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == '2'


def test_count_json_list_per_item(temp_dir):
    """
    Each string of a JSON array is reported with its count and method.

    Verification:
    1. Normal text is encoded exactly
    2. Text with a special token falls back to the heuristic (13 chars / 4.0)
    3. Empty strings count zero
    4. The last line carries the total
    """
    path = _write(temp_dir / "chunks.json", json.dumps(["a b", "<|endoftext|>", ""]))

    result = CliRunner().invoke(cli, ['count', '--model', 'gpt-4', '--json-list', '--per-item', path])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        f"{path}[0]\t2\texact",
        f"{path}[1]\t4\theuristic",
        f"{path}[2]\t0\tempty",
        "total\t6",
    ]


def test_count_repeat_threshold_option(temp_dir):
    path = _write(temp_dir / "rep.txt", "aaaaaaaa")

    result = CliRunner().invoke(cli, ['count', '--model', 'gpt-4', '--per-item', '--repeat-threshold', '5', path])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines()[0] == f"{path}\t2\theuristic"


def test_count_output_file(temp_dir):
    path = _write(temp_dir / "notes.txt", "one two three four")
    output = temp_dir / "out.txt"

    result = CliRunner().invoke(cli, ['count', '--model', 'gpt-4', '--output-file', str(output), path])

    assert result.exit_code == 0, result.output
    assert output.read_text(encoding="utf-8") == '4'


def test_count_malformed_json(temp_dir):
    path = _write(temp_dir / "bad.json", "[not json")

    result = CliRunner().invoke(cli, ['count', '--json-list', path])

    assert result.exit_code == 1
    assert 'Error parsing JSON' in result.output


def test_count_json_not_a_list_of_strings(temp_dir):
    path = _write(temp_dir / "obj.json", json.dumps({"text": "hello"}))

    result = CliRunner().invoke(cli, ['count', '--json-list', path])

    assert result.exit_code == 1
    assert 'JSON array of strings' in result.output


def test_count_invalid_configuration(temp_dir, monkeypatch):
    monkeypatch.setenv('TOKEN_ESTIMATOR_REPEAT_THRESHOLD', 'many')
    path = _write(temp_dir / "notes.txt", "one")

    result = CliRunner().invoke(cli, ['count', path])

    assert result.exit_code == 1
    assert 'TOKEN_ESTIMATOR_REPEAT_THRESHOLD' in result.output


def test_count_missing_file():
    result = CliRunner().invoke(cli, ['count', 'does-not-exist.txt'])

    assert result.exit_code != 0


def test_encodings_command():
    result = CliRunner().invoke(cli, ['encodings', 'gpt-4', 'gpt-4o', 'mystery-model'])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        "gpt-4\tcl100k_base\t4.0",
        "gpt-4o\to200k_base\t3.8",
        "mystery-model\to200k_base\t4.0",
    ]


def test_encodings_command_lists_known_names():
    result = CliRunner().invoke(cli, ['encodings'])

    assert result.exit_code == 0, result.output
    assert "p50k_base\tp50k_base\t4.2" in result.stdout.splitlines()


def test_count_undecodable_file(temp_dir):
    """A file that is not UTF-8 aborts with a red message instead of a traceback."""
    path = temp_dir / "binary.txt"
    path.write_bytes(b"hello \xff\xfe world")

    result = CliRunner().invoke(cli, ['count', '--model', 'gpt-4', str(path)], color=True)

    assert result.exit_code == 1
    assert f'Error reading {path}' in result.output
    assert '\x1b[31m' in result.output
    assert not isinstance(result.exception, UnicodeDecodeError)
