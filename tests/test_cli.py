from evenodd.cli import main


def test_help(capsys):
    assert main(["--help"]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_invalid_parameter(capsys):
    assert main(["-z"]) == 1
    assert "Error: Invalid parameter." in capsys.readouterr().err


def test_bad_config(tmp_path, capsys):
    path = tmp_path / "config.txt"
    path.write_text("nonsense\n")
    assert main(["-f", str(path)]) == 1
    assert "Error: Occurred while parsing file" in capsys.readouterr().err


def test_full_run(tmp_path, capsys):
    path = tmp_path / "config.txt"
    path.write_text("numbers_per_thread = 2\nthread_num = 3\n")
    assert main(["--file", str(path)]) == 0
    out = capsys.readouterr().out
    assert "NUM_PER_THREAD: 2\nTHREAD_NUM: 3\n" in out
    assert out.index("ODD NUMBERS:") < out.index("EVEN NUMBERS:")
    assert out.count("Position:") == 6