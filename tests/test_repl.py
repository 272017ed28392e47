import io

import pytest

from lined.ui.repl import Repl


@pytest.fixture
def run_repl(make_session):
    """Run a script through the REPL; returns (exit code, session, output)."""

    def runner(script, lines=(), visual_runner=None, filename=None, **config):
        session = make_session(lines, **config)
        out = io.StringIO()
        repl = Repl(session, io.StringIO(script), out, visual_runner=visual_runner)
        if filename is not None:
            repl.open_initial(filename)
        code = repl.run()
        return code, session, out.getvalue()

    return runner


class TestLoop:
    def test_quit(self, run_repl):
        code, _, out = run_repl("q\nL\n")
        assert code == 0
        assert "(empty)" not in out

    def test_end_of_input(self, run_repl):
        code, _, out = run_repl("")
        assert code == 0
        assert "L I N E D" in out
        assert out.endswith("Lines: 0  File: (none)\n* ")

    def test_status_after_each_command(self, run_repl):
        _, _, out = run_repl("L\nL\nQ\n", ["a"])
        # banner status plus one per command
        assert out.count("Lines: 1  File: (none)") == 3

    def test_blank_line_ignored(self, run_repl):
        _, _, out = run_repl("\n   \nQ\n")
        assert out.count("Lines: 0") == 1

    def test_lowercase_commands(self, run_repl):
        _, _, out = run_repl("l\n", ["a"])
        assert "00000: a\n" in out

    def test_unknown_command(self, run_repl):
        _, _, out = run_repl("Z\n")
        assert "* ?\n" in out

    def test_insert_and_list(self, run_repl):
        _, session, out = run_repl("I\nfoo\nbar\n.\nL\nQ\n")
        assert session.store.lines() == ("foo", "bar")
        assert "00000: foo\n00001: bar\n" in out
        assert "Lines: 2  File: (none)" in out


class TestErrors:
    def test_error_does_not_stop_loop(self, run_repl):
        _, _, out = run_repl("E 9\nL\n", ["a"])
        assert "! bad line\n" in out
        assert "00000: a\n" in out

    def test_delete_needs_address(self, run_repl):
        _, session, out = run_repl("D\n", ["a"])
        assert "! need D a[,b]\n" in out
        assert session.store.lines() == ("a",)

    def test_write_without_name(self, run_repl):
        _, _, out = run_repl("W\n", ["a"])
        assert "! W needs filename (no current file)\n" in out

    def test_bad_substitution(self, run_repl):
        _, _, out = run_repl("R 1 /a/\n", ["a"])
        assert "! syntax: R a,b /old/new/[g]\n" in out

    def test_capacity(self, run_repl):
        _, session, out = run_repl("I\nx\ny\n.\nL\n", [], max_lines=1)
        assert "! out of space\n" in out
        assert session.store.lines() == ("x",)

    def test_failed_load_asks_for_reload(self, make_session, monkeypatch):
        session = make_session(["keep"])

        def load_file(filename):
            def lines():
                yield "partial"
                raise MemoryError

            session.store.load(lines())

        monkeypatch.setattr(session.store, "load_file", load_file)
        out = io.StringIO()
        Repl(session, io.StringIO("O big.txt\n"), out).run()

        text = out.getvalue()
        assert "! alloc failed while loading; document cleared\n" in text
        assert "! document is empty; reload it with O name\n" in text
        assert session.line_count == 0

    def test_allocation_failure_with_lines_left(self, make_session, monkeypatch):
        session = make_session(["keep"])

        def insert_line(pos, text=''):
            raise MemoryError

        monkeypatch.setattr(session.store, "insert_line", insert_line)
        out = io.StringIO()
        Repl(session, io.StringIO("I\nx\n"), out).run()

        text = out.getvalue()
        assert "! alloc failed\n" in text
        assert "reload" not in text
        assert session.store.lines() == ("keep",)


class TestCommands:
    def test_replace(self, run_repl):
        _, session, out = run_repl("R 1 /a/b/g\n", ["aaa", "aaa"])
        assert session.store.lines() == ("bbb", "aaa")
        assert "Replaced 3 occurrence(s).\n" in out

    def test_search(self, run_repl):
        _, _, out = run_repl("S /WORLD/\n", ["hello world", "nope"])
        assert "00000: hello world\n-- 1 match(es)\n" in out

    def test_print_status(self, run_repl):
        _, _, out = run_repl("P\nL 2,3\nP\n", ["a", "b", "c"])
        assert "Last range: (unset)\n" in out
        assert "Last range: 2,3\n" in out

    def test_help(self, run_repl):
        _, _, out = run_repl("?\nH\n")
        assert out.count("Commands:") == 2
        assert "delete lines (address required)" in out

    def test_visual_calls_runner(self, run_repl):
        seen = []
        _, session, _ = run_repl("V\n", ["a"], visual_runner=seen.append)
        assert seen == [session]

    def test_visual_without_terminal(self, run_repl):
        _, _, out = run_repl("V\n")
        assert "! visual mode needs a terminal\n" in out

    def test_write_and_reopen(self, run_repl, tmp_path):
        path = tmp_path / "doc.txt"
        _, session, out = run_repl(f"W {path}\nD 1\nO {path}\nL\n", ["a", "b"])
        assert path.read_bytes() == b"a\nb\n"
        assert f"-- wrote 2 line(s) to {path}\n" in out
        assert "-- loaded 2 line(s)\n" in out
        assert session.store.lines() == ("a", "b")
        assert f"File: {path}" in out


class TestInitialFile:
    def test_loads_file(self, run_repl, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_bytes(b"one\ntwo\n")
        _, session, out = run_repl("", filename=str(path))
        assert session.store.lines() == ("one", "two")
        assert f"Lines: 2  File: {path}" in out

    def test_missing_file_starts_empty(self, run_repl, tmp_path):
        path = tmp_path / "new.txt"
        _, session, out = run_repl("W\n", filename=str(path))
        assert f"! couldn't open '{path}' (starting empty)\n" in out
        assert session.filename == str(path)
        assert path.read_bytes() == b""
