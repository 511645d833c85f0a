"""
应用程序与命令行入口测试
Application and Entry Point Tests
"""
import io

import pytest

from fair_rps.app import Application, EXIT_OK, EXIT_CONFIGURATION_ERROR, EXIT_RANDOMNESS_ERROR
from fair_rps.game.commitment import HmacCommitment
from fair_rps.main import main
from fair_rps.utils.exceptions import RandomnessSourceException


@pytest.mark.parametrize(
    "argv, message",
    [
        ([], "Example:"),
        (["Rock"], "Not enough arguments"),
        (["Rock", "Paper"], "Not enough arguments"),
        (["Rock", "Paper", "Scissors", "Lizard"], "odd number"),
        (["Rock", "rock", "Paper"], "unique"),
    ],
)
def test_invalid_move_lists_exit_with_code_1(argv, message, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert message in captured.err
    assert "HMAC:" not in captured.out


def test_quit_exits_with_code_0(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "0")

    with pytest.raises(SystemExit) as exc_info:
        main(["Rock", "Paper", "Scissors", "Lizard", "Spock"])

    assert exc_info.value.code == 0
    captured = capsys.readouterr()
    assert "5. Spock" in captured.out
    assert "Goodbye!" in captured.out


def make_app(console, **kwargs):
    errors = io.StringIO()
    app = Application(
        input_func=console.input,
        output_func=console.print,
        error_stream=errors,
        **kwargs
    )
    return app, errors


def test_full_round_through_application(console_factory):
    console = console_factory(["?", "2"])
    app, errors = make_app(console, computer_index=1)

    assert app.run(["Rock", "Paper", "Scissors"]) == EXIT_OK
    assert errors.getvalue() == ""

    result = app.game_controller.last_result
    assert result.verdict.value == "Win"
    assert "You Win" in console.outputs[-1]
    key = bytes.fromhex(result.key_hex)
    assert HmacCommitment().verify(key, "Rock", app.session.digest)


def test_duplicate_moves_create_no_session(console_factory):
    console = console_factory([])
    app, errors = make_app(console)

    assert app.run(["Rock", "ROCK", "Paper"]) == EXIT_CONFIGURATION_ERROR
    assert app.session is None
    assert console.outputs == []
    assert "unique" in errors.getvalue()


def test_randomness_failure_shows_no_digest(console_factory):
    class BrokenCommitment(HmacCommitment):
        def generate_key(self):
            raise RandomnessSourceException("entropy source unavailable")

    console = console_factory(["1"])
    app, errors = make_app(console, commitment=BrokenCommitment())

    assert app.run(["Rock", "Paper", "Scissors"]) == EXIT_RANDOMNESS_ERROR
    assert console.outputs == []
    assert "Fatal error" in errors.getvalue()


def test_missing_config_file_is_configuration_error(tmp_path, console_factory):
    console = console_factory(["1"])
    app, errors = make_app(console, config_path=str(tmp_path / "missing.yaml"))

    assert app.run(["Rock", "Paper", "Scissors"]) == EXIT_CONFIGURATION_ERROR
    assert "Configuration error" in errors.getvalue()
    assert console.outputs == []


def test_table_format_from_config(tmp_path, console_factory):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("game:\n  table_format: github\nlogging:\n  level: ERROR\n", encoding="utf-8")

    console = console_factory(["?", "0"])
    app, errors = make_app(console, config_path=str(config_file))

    assert app.run(["Rock", "Paper", "Scissors"]) == EXIT_OK
    assert app.config['game']['table_format'] == "github"
    help_output = [text for text in console.outputs if "PC \\ User >" in text][0]
    assert "+" not in help_output


def test_invalid_input_reported_on_error_stream(console_factory):
    console = console_factory(["x", "0"])
    app, errors = make_app(console)

    assert app.run(["Rock", "Paper", "Scissors"]) == EXIT_OK
    assert "Invalid input. Please try again." in errors.getvalue()
    assert not any("Invalid input" in text for text in console.outputs)


def _undecodable_config(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_bytes(b"\xff\xfe")
    return str(config_file)


def _directory_config(tmp_path):
    return str(tmp_path)


def _unwritable_log_file_config(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("regular file", encoding="utf-8")
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        f"logging:\n  file: '{blocker / 'logs' / 'fair_rps.log'}'\n", encoding="utf-8"
    )
    return str(config_file)


@pytest.mark.parametrize(
    "make_config",
    [_undecodable_config, _directory_config, _unwritable_log_file_config],
    ids=["not-utf8", "directory", "log-file-under-regular-file"],
)
def test_unreadable_config_exits_with_configuration_error(make_config, tmp_path, monkeypatch, capsys):
    """无法读取的配置或无法创建的日志文件按配置错误退出，不输出异常堆栈"""
    monkeypatch.setattr("builtins.input", lambda prompt: "0")

    with pytest.raises(SystemExit) as exc_info:
        main(["Rock", "Paper", "Scissors", "--config", make_config(tmp_path)])

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert "Configuration error" in captured.err
    assert "Traceback" not in captured.err
    assert "HMAC:" not in captured.out
