import io
import os

import pytest

from pickmenu.stest import Options, UsageError, main, parse_args, passes, run


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "plain").write_text("data")
    (tmp_path / "empty").write_text("")
    (tmp_path / ".hidden").write_text("data")
    (tmp_path / "sub").mkdir()
    return tmp_path


def test_hidden_files_need_a(tree):
    path = str(tree / ".hidden")
    assert not passes(path, ".hidden", Options())
    assert passes(path, ".hidden", Options(flags={"a"}))


def test_missing_file_fails_and_v_inverts(tree):
    path = str(tree / "absent")
    assert not passes(path, "absent", Options())
    assert passes(path, "absent", Options(flags={"v"}))


def test_directory_and_regular_flags(tree):
    directory, regular = str(tree / "sub"), str(tree / "plain")
    assert passes(directory, "sub", Options(flags={"d"}))
    assert not passes(directory, "sub", Options(flags={"f"}))
    assert passes(regular, "plain", Options(flags={"f"}))
    assert not passes(regular, "plain", Options(flags={"d"}))


def test_nonempty_flag(tree):
    assert passes(str(tree / "plain"), "plain", Options(flags={"s"}))
    assert not passes(str(tree / "empty"), "empty", Options(flags={"s"}))


def test_symlink_flag(tree):
    link = tree / "link"
    os.symlink(tree / "plain", link)
    assert passes(str(link), "link", Options(flags={"h"}))
    assert not passes(str(tree / "plain"), "plain", Options(flags={"h"}))


def test_broken_symlink_fails_stat(tree):
    link = tree / "dangling"
    os.symlink(tree / "nowhere", link)
    assert not passes(str(link), "dangling", Options(flags={"h"}))


def test_executable_flag(tree):
    script, data = tree / "script", tree / "plain"
    script.write_text("x")
    script.chmod(0o755)
    data.chmod(0o644)
    assert passes(str(script), "script", Options(flags={"x"}))
    assert not passes(str(data), "plain", Options(flags={"x"}))


def test_setuid_flag(tree):
    target = tree / "plain"
    target.chmod(0o4755)
    assert passes(str(target), "plain", Options(flags={"u"}))
    target.chmod(0o755)
    assert not passes(str(target), "plain", Options(flags={"u"}))


def test_fifo_flag(tree):
    fifo = tree / "pipe"
    os.mkfifo(fifo)
    assert passes(str(fifo), "pipe", Options(flags={"p"}))
    assert not passes(str(tree / "plain"), "plain", Options(flags={"p"}))


def test_newer_and_older(tree):
    old, new = tree / "plain", tree / "empty"
    os.utime(old, (1000, 1000))
    os.utime(new, (2000, 2000))
    options, _ = parse_args(["-n", str(old)])
    assert passes(str(new), "empty", options)
    assert not passes(str(old), "plain", options)
    options, _ = parse_args(["-o", str(new)])
    assert passes(str(old), "plain", options)
    assert not passes(str(new), "empty", options)


def test_parse_combined_flags_and_operands():
    options, operands = parse_args(["-fx", "a", "-d"])
    assert options.flags == {"f", "x"}
    assert operands == ["a", "-d"]


def test_parse_attached_reference(tree):
    ref = tree / "plain"
    os.utime(ref, (1000, 1000))
    options, operands = parse_args([f"-n{ref}", "b"])
    assert options.newer_than == 1000
    assert operands == ["b"]


def test_parse_flags_before_reference(tree):
    ref = tree / "plain"
    os.utime(ref, (3000, 3000))
    options, _ = parse_args(["-fo", str(ref)])
    assert options.flags == {"f"}
    assert options.older_than == 3000


def test_parse_double_dash_ends_options():
    options, operands = parse_args(["--", "-f"])
    assert options.flags == set()
    assert operands == ["-f"]


def test_parse_lone_dash_is_operand():
    options, operands = parse_args(["-", "-f"])
    assert operands == ["-", "-f"]
    assert options.flags == set()


def test_parse_unknown_flag():
    with pytest.raises(UsageError):
        parse_args(["-z"])


def test_parse_missing_reference_argument():
    with pytest.raises(UsageError):
        parse_args(["-f", "-n"])


def test_parse_unreadable_reference(tree, capsys):
    missing = str(tree / "absent")
    options, _ = parse_args(["-n", missing])
    assert options.newer_than is None
    assert missing in capsys.readouterr().err


def test_run_from_stdin(tree):
    plain, sub = str(tree / "plain"), str(tree / "sub")
    out = io.StringIO()
    status = run(Options(flags={"f"}), [], io.StringIO(f"{plain}\n{sub}\n"), out)
    assert status == 0
    assert out.getvalue().splitlines() == [plain]


def test_run_no_match_returns_one(tree):
    out = io.StringIO()
    status = run(Options(flags={"d"}), [str(tree / "plain")], io.StringIO(), out)
    assert status == 1
    assert out.getvalue() == ""


def test_run_lists_directory_contents(tree):
    out = io.StringIO()
    status = run(Options(flags={"l", "f"}), [str(tree)], io.StringIO(), out)
    assert status == 0
    assert sorted(out.getvalue().splitlines()) == ["empty", "plain"]


def test_run_lists_dot_entries(tree):
    out = io.StringIO()
    run(Options(flags={"l", "a", "d"}), [str(tree)], io.StringIO(), out)
    assert sorted(out.getvalue().splitlines()) == [".", "..", "sub"]


def test_run_list_flag_on_file_tests_operand(tree):
    plain = str(tree / "plain")
    out = io.StringIO()
    run(Options(flags={"l"}), [plain], io.StringIO(), out)
    assert out.getvalue().splitlines() == [plain]


def test_run_quiet_prints_nothing(tree):
    out = io.StringIO()
    status = run(Options(flags={"q"}), [str(tree / "plain")], io.StringIO(), out)
    assert status == 0
    assert out.getvalue() == ""


def test_main_usage_error(capsys):
    assert main(["-z"]) == 2
    assert capsys.readouterr().err.startswith("usage:")


def test_main_prints_matches(tree, capsys):
    plain = str(tree / "plain")
    assert main(["-f", plain, str(tree / "sub")]) == 0
    assert capsys.readouterr().out.splitlines() == [plain]