import io
import json

import pytest

from wsengine.logfile import LogFile
from wsengine.logsys import Log
from wsengine.main import handle_command, main


@pytest.fixture
def log(tmp_path):
    log_file = LogFile(tmp_path / "main.log")
    logger = Log(log_file, stdout=io.StringIO(), stderr=io.StringIO())
    logger.set_log_level(6)
    yield logger
    log_file.close()


def test_exit_command_stops(log):
    assert handle_command("exit", log) is False


def test_info_command(log):
    assert handle_command("info", log) is True
    assert "Received info command" in log._out().getvalue()


def test_unknown_command(log):
    assert handle_command("bogus", log) is True
    assert "Unknown command: bogus" in log._err().getvalue()


def test_main_runs_and_exits(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "log").mkdir()
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"general": {"communication": {"port": 0}}}), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("info\nbogus\nexit\n"))
    assert main(["--config", str(config)]) == 0
    captured = capsys.readouterr()
    assert "Entering main loop" in captured.out
    assert "Received info command" in captured.out
    assert "Shutting down system..." in captured.out
    assert "Unknown command: bogus" in captured.err


def test_main_bad_config(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "log").mkdir()
    assert main(["--config", str(tmp_path / "absent.json")]) == 1
    assert "Cannot open config file" in capsys.readouterr().err