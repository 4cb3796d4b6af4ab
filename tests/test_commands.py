import pytest

from dailydrills.commands import (
    CommandConfig,
    Count,
    Echo,
    FileSize,
    Help,
    InvalidCommandError,
    StatsJson,
    StatsYaml,
    execute,
    format_help,
    get_file_size,
    main,
    parse_args,
)
from dailydrills.wordcount import CliIOError, MissingArgumentError, analyze_file


def test_analyze_file_pass(tmp_path):
    path = tmp_path / "test_input.txt"
    path.write_text("Hello world\nLine 2", encoding="utf-8")
    assert analyze_file(path).lines == 2


def test_analyze_empty_file_pass(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert analyze_file(path).lines == 0


def test_analyze_file_fail(tmp_path):
    with pytest.raises(CliIOError):
        analyze_file(tmp_path / "test.txt")


def test_from_args_missing_argument():
    with pytest.raises(MissingArgumentError):
        CommandConfig.from_args(["only_one"])


def test_parse_count_command():
    assert parse_args(["mycli", "count", "test_input.txt"]) == Count(
        filename="test_input.txt"
    )


def test_parse_count_command_fails():
    with pytest.raises(InvalidCommandError):
        parse_args(["mycli", "what", "test_input.txt"])


def test_parse_echo_command():
    assert parse_args(["mycli", "echo", "what is this?"]) == Echo(text="what is this?")


def test_parse_yaml_command():
    assert parse_args(["mycli", "statsyaml", "test.txt"]) == StatsYaml(
        filename="test.txt"
    )


def test_parse_size_command():
    assert parse_args(["mycli", "size", "test.txt"]) == FileSize(filename="test.txt")


def test_parse_json_command_case_insensitive():
    assert parse_args(["mycli", "StatsJSON", "a.txt"]) == StatsJson(filename="a.txt")


def test_parse_help_command():
    config = CommandConfig.from_args(["mycli", "--help"])
    assert config.command == Help()


def test_parse_help_command_fails():
    with pytest.raises(MissingArgumentError):
        parse_args(["mycli", "--help", "something"])


def test_parse_command_fails():
    with pytest.raises(MissingArgumentError):
        CommandConfig.from_args(["mycli"])


def test_parse_command_fails_count_no_arg():
    with pytest.raises(MissingArgumentError):
        CommandConfig.from_args(["mycli", "count"])


def test_analyze_file_unreadable(tmp_path):
    path = tmp_path / "fail.txt"
    path.write_bytes(bytes([0x80]))
    with pytest.raises(CliIOError):
        analyze_file(path)


def test_get_file_size_byte(tmp_path):
    path = tmp_path / "size.txt"
    path.write_text("test", encoding="utf-8")
    assert get_file_size(path) == 4


def test_get_file_size_fails_no_file(tmp_path):
    with pytest.raises(CliIOError):
        get_file_size(tmp_path / "nopath.txt")


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text("Hello world\nLine 2", encoding="utf-8")
    return str(path)


def test_execute_count(sample):
    assert execute(Count(filename=sample)) == "lines: 2, words: 4, chars: 18"


def test_execute_json(sample):
    assert execute(StatsJson(filename=sample)) == (
        '{"lines": 2, "words": 4, "chars": 18}'
    )


def test_execute_yaml(sample):
    assert execute(StatsYaml(filename=sample)) == (
        "items:\n  lines: 2\n  words: 4\n  chars: 18"
    )


def test_execute_size(sample):
    assert execute(FileSize(filename=sample)) == "Size of file is: 18 Byte"


def test_execute_echo():
    assert execute(Echo(text="hi there")) == "Echo: hi there"


def test_execute_help_matches_format_help():
    assert execute(Help()) == format_help()


def test_format_help_lists_commands():
    text = format_help()
    assert text.startswith("Commands\n\t\n")
    for name in ("count <file>", "size  <file>", "statsjson", "statsyaml", "echo  <text>"):
        assert name in text


def test_execute_count_missing_file(tmp_path):
    with pytest.raises(CliIOError):
        execute(Count(filename=str(tmp_path / "missing.txt")))


def test_main_echo(capsys):
    assert main(["echo", "hello"]) == 0
    assert capsys.readouterr().out == "Echo: hello\n"


def test_main_error(capsys):
    assert main([]) == 1
    assert "Error" in capsys.readouterr().err