import io
import logging

import pytest

from lined.__main__ import main, parse_args
from lined.core.config import EditorConfig
from lined.utils.logging_config import setup_logging


class TestConfig:
    def test_defaults(self):
        config = EditorConfig()
        assert config.max_lines == 1200
        assert config.line_len == 256
        assert config.max_line_length == 255
        assert config.text_rows == 23
        assert config.encoding == "latin-1"

    @pytest.mark.parametrize("overrides", [
        {"max_lines": 0},
        {"line_len": 1},
        {"screen_rows": 1},
        {"tab_width": -1},
        {"replace_limit": 0},
        {"encoding": "no-such-codec"},
    ])
    def test_invalid(self, overrides):
        with pytest.raises(ValueError):
            EditorConfig(**overrides)


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.file is None
        assert args.max_lines == 1200
        assert args.line_len == 256
        assert args.log_file is None

    def test_options(self):
        args = parse_args(["doc.txt", "--max-lines", "10", "--line-len", "80", "--encoding", "utf-8"])
        assert args.file == "doc.txt"
        assert args.max_lines == 10
        assert args.line_len == 80
        assert args.encoding == "utf-8"


class TestMain:
    def test_quits(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("Q\n"))
        assert main([]) == 0
        assert "Lines: 0  File: (none)" in capsys.readouterr().out

    def test_opens_file(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_bytes(b"a\nb\n")
        monkeypatch.setattr("sys.stdin", io.StringIO("L\n"))
        assert main([str(path)]) == 0
        out = capsys.readouterr().out
        assert "00000: a\n00001: b\n" in out

    def test_bad_config(self, capsys):
        assert main(["--max-lines", "0"]) == 2
        assert "Error:" in capsys.readouterr().err

    def test_bad_log_level(self, capsys):
        assert main(["--log-level", "LOUD"]) == 2
        assert "Unknown log level" in capsys.readouterr().err


class TestLogging:
    def teardown_method(self):
        setup_logging()

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "lined.log"
        setup_logging("debug", str(log_file))
        logging.getLogger("lined.core.buffer").info("loaded something")
        for handler in logging.getLogger("lined").handlers:
            handler.flush()
        assert "lined.core.buffer - INFO - loaded something" in log_file.read_text()

    def test_environment_level(self, monkeypatch):
        monkeypatch.setenv("LINED_LOG_LEVEL", "error")
        setup_logging()
        assert logging.getLogger("lined").level == logging.ERROR

    def test_without_file_discards(self, monkeypatch):
        monkeypatch.delenv("LINED_LOG_FILE", raising=False)
        setup_logging()
        handlers = logging.getLogger("lined").handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging("LOUD")
