import io

from cellsim.cli import main, run
from cellsim.console import Console


def make_console(text):
    return Console(stdin=io.StringIO(text), stdout=io.StringIO(), stderr=io.StringIO())


def test_exit_says_goodbye(tmp_path):
    console = make_console("3\n")
    run(console, tmp_path / "input.txt")
    out = console.stdout.getvalue()
    assert "=== Cellular Network Simulator ===" in out
    assert out.endswith("Goodbye!\n")


def test_out_of_range_is_reported(tmp_path):
    console = make_console("9\n3\n")
    run(console, tmp_path / "input.txt")
    assert console.stderr.getvalue() == "ERROR: Input out of valid range"
    assert "Goodbye!" in console.stdout.getvalue()


def test_invalid_input_is_reported(tmp_path):
    console = make_console("x\n3\n")
    run(console, tmp_path / "input.txt")
    assert console.stderr.getvalue() == "ERROR: Invalid input: not a valid number"


def test_end_of_input_stops(tmp_path):
    console = make_console("")
    run(console, tmp_path / "input.txt")
    assert "Goodbye!" not in console.stdout.getvalue()
    assert console.stdout.getvalue().count("Choose mode (1-3): ") == 1


def test_interactive_managers_persist(tmp_path):
    script = "1\n2\n1\n1\n1800\n7\n1\n2\n5\n7\n3\n"
    console = make_console(script)
    run(console, tmp_path / "input.txt")
    out = console.stdout.getvalue()
    assert "✅ User added successfully." in out
    assert "Current Users: 1\n" in out


def test_file_mode_from_menu(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("3 1 1800\n")
    console = make_console("2\n3\n6\n3\n")
    run(console, path)
    out = console.stdout.getvalue()
    assert "[File Mode - 3G]" in out
    assert out.endswith("Goodbye!\n")


def test_main_uses_standard_streams(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main(["--input", str(tmp_path / "input.txt")]) == 0
    assert "Goodbye!" in capsys.readouterr().out