import io

import pytest

from cellsim.console import Console
from cellsim.exceptions import (
    CoreCapacityError,
    InvalidFrequencyError,
    OutOfRangeException,
)
from cellsim.filemode import (
    load_manager,
    parse_input_file,
    remove_generation_entry,
    run_file_mode,
)

SAMPLE = "# users\n2 1 1800\n3 2 1800\n2 3 2000\n"


def make_console(text):
    return Console(stdin=io.StringIO(text), stdout=io.StringIO(), stderr=io.StringIO())


def test_parse_selects_generation():
    assert parse_input_file(SAMPLE, 2) == [(1, 1800), (3, 2000)]
    assert parse_input_file(SAMPLE, 3) == [(2, 1800)]
    assert parse_input_file(SAMPLE, 7) == []


def test_parse_skips_malformed_lines():
    text = "2 9 1800\nX 1 1800\n\r\n2 4 2200\n"
    assert parse_input_file(text, 2) == [(4, 2200)]


def test_parse_missing_frequency():
    assert parse_input_file("2 1", 2) == []
    assert parse_input_file("2 1\n", 2) == [(1, 0)]


def test_parse_accepts_tabs():
    assert parse_input_file("5\t3\t1810\n", 5) == [(3, 1810)]


def test_remove_entry_of_generation():
    assert remove_generation_entry(SAMPLE, 2, 2) == "# users\n2 1 1800\n3 2 1800\n"


@pytest.mark.parametrize("index", [1, 2])
def test_remove_round_trip(index):
    before = parse_input_file(SAMPLE, 2)
    after = parse_input_file(remove_generation_entry(SAMPLE, 2, index), 2)
    expected = list(before)
    del expected[index - 1]
    assert after == expected


def test_remove_keeps_other_generations():
    result = remove_generation_entry(SAMPLE, 3, 1)
    assert parse_input_file(result, 2) == parse_input_file(SAMPLE, 2)
    assert parse_input_file(result, 3) == []
    assert result.startswith("# users\n")


def test_remove_line_endings():
    assert remove_generation_entry("# a\n2 1 1800", 2, 5) == "# a\n2 1 1800\n"
    assert remove_generation_entry("2 1 1800\n# end", 2, 1) == "# end"


def test_load_manager_reads_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE)
    manager, rejected = load_manager(path, 2)
    assert manager.user_count == 2
    assert rejected == []
    assert [u.frequency_mhz for u in manager.users] == [1800, 2000]


def test_load_manager_missing_file(tmp_path):
    manager, rejected = load_manager(tmp_path / "absent.txt", 3)
    assert manager.user_count == 0
    assert rejected == []


def test_load_manager_rejects_invalid_frequency(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("2 1 1234\n2 1 1800\n")
    manager, rejected = load_manager(path, 2)
    assert manager.user_count == 1
    assert len(rejected) == 1
    assert isinstance(rejected[0], InvalidFrequencyError)


def test_load_manager_respects_core_limit(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("2 1 1800\n" * 10)
    manager, rejected = load_manager(path, 2)
    assert manager.core.current_load <= manager.core.max_capacity
    assert manager.user_count + len(rejected) == 10
    assert rejected and all(isinstance(e, CoreCapacityError) for e in rejected)


def test_run_returns_on_zero(tmp_path):
    console = make_console("0\n")
    run_file_mode(console, tmp_path / "input.txt")
    assert "Select Network Technology" in console.stdout.getvalue()
    assert "[File Mode" not in console.stdout.getvalue()


def test_run_invalid_choice(tmp_path):
    console = make_console("1\n")
    run_file_mode(console, tmp_path / "input.txt")
    assert console.stdout.getvalue().endswith("Invalid choice.\n")


def test_run_loads_and_saves(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE)
    console = make_console("2\n6\n")
    run_file_mode(console, path)
    out = console.stdout.getvalue()
    assert "[File Mode - 2G]" in out
    assert out.count("✅ User added successfully.") == len(parse_input_file(SAMPLE, 2))
    assert "💾 File updated. Returning to main menu..." in out


def test_run_remove_updates_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE)
    console = make_console("2\n1\n1\n6\n")
    run_file_mode(console, path)
    assert "User removed and file updated." in console.stdout.getvalue()
    assert path.read_text() == remove_generation_entry(SAMPLE, 2, 1)
    assert not (tmp_path / "temp_input.txt").exists()


def test_run_remove_without_users(tmp_path):
    console = make_console("2\n1\n6\n")
    run_file_mode(console, tmp_path / "input.txt")
    assert "No users to remove." in console.stdout.getvalue()


def test_run_reports_invalid_menu_input(tmp_path):
    console = make_console("2\nabc\n6\n")
    run_file_mode(console, tmp_path / "input.txt")
    assert "❌ ERROR: Invalid input: not a valid number" in console.stderr.getvalue()


def test_run_switch_technology(tmp_path):
    console = make_console("2\n5\n3\n6\n")
    run_file_mode(console, tmp_path / "input.txt")
    out = console.stdout.getvalue()
    assert out.index("[File Mode - 2G]") < out.index("[File Mode - 3G]")


def test_run_users_on_frequency(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE)
    console = make_console("2\n3\n2000\n6\n")
    run_file_mode(console, path)
    assert "U2 | 5 msgs | Data" in console.stdout.getvalue()


def test_run_technology_out_of_range(tmp_path):
    with pytest.raises(OutOfRangeException):
        run_file_mode(make_console("9\n"), tmp_path / "input.txt")


def test_run_end_of_input(tmp_path):
    with pytest.raises(EOFError):
        run_file_mode(make_console("2\n"), tmp_path / "input.txt")