import io
import json

import pytest

from slotstats import cli


@pytest.fixture
def stdin(monkeypatch):
    def _feed(text: str):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return _feed


def test_stdin_rendered(stdin, capsys):
    stdin("4\n3\n2\n1\n")
    assert cli.main(["--precision", "4"]) == 0
    out = capsys.readouterr().out
    assert "Entries  : 4" in out
    assert "StdDev   : 1.2910" in out
    assert "    50th : 3.0000" in out


def test_file_json(write_file, capsys):
    path = write_file("a.txt", "2 1")
    assert cli.main([str(path), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data[str(path)]["mean"] == 1.5
    assert data[str(path)]["percentile_25"] == 1


def test_multiple_files_headed(write_file, capsys):
    a = write_file("a.txt", "1 1")
    b = write_file("b.txt", "1 2 3")
    assert cli.main([str(a), str(b)]) == 0
    out = capsys.readouterr().out
    assert f"== {a}" in out
    assert f"== {b}" in out


def test_table(write_file, capsys):
    a = write_file("a.txt", "1 1")
    b = write_file("b.csv", "latency_ms\n4\n3\n2\n1\n")
    assert cli.main([str(a), str(b), "--table", "--precision", "2"]) == 0
    out = capsys.readouterr().out
    assert "percentile_99" in out
    assert "2.50" in out


def test_empty_input_exit_code(stdin, capsys):
    stdin("# nothing here\n")
    assert cli.main([]) == cli.EXIT_EMPTY
    assert "<stdin>: no samples" in capsys.readouterr().err


def test_empty_input_exit_code_table(write_file, capsys):
    a = write_file("a.txt", "1 2")
    b = write_file("b.txt", "")
    assert cli.main([str(a), str(b), "--table"]) == cli.EXIT_EMPTY
    assert f"{b}: no samples" in capsys.readouterr().err


def test_parse_error_exit_code(write_file, capsys):
    path = write_file("bad.txt", "1\nx\n")
    assert cli.main([str(path)]) == cli.EXIT_PARSE
    assert "not a number" in capsys.readouterr().err


def test_missing_file_exit_code(tmp_path, capsys):
    assert cli.main([str(tmp_path / "absent.txt")]) == cli.EXIT_PARSE
    assert "absent.txt" in capsys.readouterr().err


def test_verbose_reports_counts(stdin, capsys):
    stdin("1 2 3")
    assert cli.main(["-v"]) == 0
    assert "<stdin>: 3 samples" in capsys.readouterr().err


def test_not_utf8_exit_code(tmp_path, capsys):
    path = tmp_path / "bin.txt"
    path.write_bytes(b"1 \xff\xfe 2\n")
    assert cli.main([str(path)]) == cli.EXIT_PARSE
    assert "not utf-8 text" in capsys.readouterr().err


def test_empty_csv_exit_code(write_file, capsys):
    path = write_file("empty.csv", "")
    assert cli.main([str(path)]) == cli.EXIT_PARSE
    assert "empty file" in capsys.readouterr().err


def test_uneven_csv_exit_code(write_file, capsys):
    path = write_file("z.csv", "a,b\n1,2\n2,3,4\n")
    assert cli.main([str(path)]) == cli.EXIT_PARSE
    assert "malformed csv" in capsys.readouterr().err


def test_header_only_csv_is_empty_input(write_file, capsys):
    path = write_file("h.csv", "latency_ms\n")
    assert cli.main([str(path)]) == cli.EXIT_EMPTY
    assert f"{path}: no samples" in capsys.readouterr().err


def test_negative_precision_rejected(stdin, capsys):
    stdin("1 2 3")
    with pytest.raises(SystemExit) as exc:
        cli.main(["--precision", "-1"])
    assert exc.value.code == 2
    assert "must be >= 0" in capsys.readouterr().err


def test_zero_precision_allowed(stdin, capsys):
    stdin("2 1")
    assert cli.main(["--precision", "0"]) == 0
    assert "Maximum  :  2" in capsys.readouterr().out
