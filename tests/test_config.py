import pytest

from evenodd.config import (
    MAX_NUM_PER_THREAD,
    MAX_THREAD_NUM,
    Config,
    ConfigError,
    parse_file,
    parse_line,
)


def write(tmp_path, text):
    path = tmp_path / "config.txt"
    path.write_text(text)
    return path


def test_parse_valid_file(tmp_path):
    path = write(tmp_path, "numbers_per_thread = 5\nthread_num=3\n")
    assert parse_file(path) == Config(numbers_per_thread=5, thread_num=3)


def test_limits_are_accepted(tmp_path):
    path = write(
        tmp_path,
        f"numbers_per_thread={MAX_NUM_PER_THREAD}\nthread_num={MAX_THREAD_NUM}\n",
    )
    config = parse_file(path)
    assert config.numbers_per_thread == MAX_NUM_PER_THREAD
    assert config.thread_num == MAX_THREAD_NUM


def test_thread_num_over_limit(tmp_path):
    path = write(tmp_path, f"thread_num={MAX_THREAD_NUM + 1}\n")
    with pytest.raises(ConfigError, match="Invalid number for thread_num"):
        parse_file(path)


def test_numbers_per_thread_over_limit():
    with pytest.raises(ConfigError, match="Invalid number for numbers_per_thread"):
        parse_line(f"numbers_per_thread={MAX_NUM_PER_THREAD + 1}\n", Config())


def test_interior_space_is_rejected():
    with pytest.raises(ConfigError, match="Invalid number for thread_num"):
        parse_line("thread_num = 1 2\n", Config())


def test_non_digit_value_is_invalid_line():
    with pytest.raises(ConfigError, match="Invalid line"):
        parse_line("thread_num = abc\n", Config())


def test_unknown_key():
    with pytest.raises(ConfigError, match="Invalid line"):
        parse_line("threads = 4\n", Config())


def test_key_with_two_trailing_spaces_is_unknown():
    with pytest.raises(ConfigError, match="Invalid line"):
        parse_line("thread_num  = 4\n", Config())


def test_leading_separators_are_skipped():
    config = Config()
    parse_line("==thread_num=4\n", config)
    assert config.thread_num == 4


def test_parse_line_updates_only_its_key():
    config = Config(numbers_per_thread=9, thread_num=2)
    parse_line("numbers_per_thread=7", config)
    assert config == Config(numbers_per_thread=7, thread_num=2)


def test_empty_file(tmp_path):
    path = write(tmp_path, "")
    with pytest.raises(ConfigError, match="Config file is empty"):
        parse_file(path)


def test_blank_line_is_an_error(tmp_path):
    path = write(tmp_path, "thread_num=2\n\n")
    with pytest.raises(ConfigError, match="Occurred while parsing file"):
        parse_file(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="While opening config file"):
        parse_file(tmp_path / "absent.txt")