from newshell.pipeline import MAX_COMMANDS, handle_pipeline, split_pipeline


def _script(directory, name, body):
    path = directory / name
    path.write_text("#!/bin/sh\n" + body + "\n")
    path.chmod(0o755)
    return path


def test_split_two_commands():
    assert split_pipeline("ls -l | grep x") == [["ls", "-l"], ["grep", "x"]]


def test_split_handles_tabs_and_newlines():
    assert split_pipeline("a\tb|c\n") == [["a", "b"], ["c"]]


def test_split_drops_empty_segments():
    assert split_pipeline("a||b") == [["a"], ["b"]]


def test_split_keeps_at_most_three_commands():
    commands = split_pipeline("a|b|c|d|e")
    assert len(commands) == MAX_COMMANDS
    assert commands == [["a"], ["b"], ["c"]]


def test_split_of_only_bars_is_empty():
    assert split_pipeline("|") == []


def test_two_stage_pipeline(tmp_path):
    producer = _script(tmp_path, "producer", "echo hello")
    consumer = _script(tmp_path, "consumer", 'read x\necho "got $x" > "$1"')
    out = tmp_path / "out.txt"
    statuses = handle_pipeline(f"{producer} | {consumer} {out}")
    assert statuses == [0, 0]
    assert out.read_text() == "got hello\n"


def test_three_stage_pipeline_ignores_fourth(tmp_path):
    producer = _script(tmp_path, "producer", "echo hello")
    relay = _script(tmp_path, "relay", "cat")
    consumer = _script(tmp_path, "consumer", 'read x\necho "got $x" > "$1"')
    out = tmp_path / "out.txt"
    statuses = handle_pipeline(f"{producer} | {relay} | {consumer} {out} | /nonexistent/cmd")
    assert len(statuses) == MAX_COMMANDS
    assert all(status == 0 for status in statuses)
    assert out.read_text() == "got hello\n"


def test_failed_stage_gives_eof_to_next(tmp_path, capsys):
    consumer = _script(tmp_path, "consumer", 'cat > "$1"')
    out = tmp_path / "out.txt"
    statuses = handle_pipeline(f"{tmp_path}/absent | {consumer} {out}")
    assert statuses[0] == 1
    assert statuses[1] == 0
    assert out.read_text() == ""
    assert capsys.readouterr().err.startswith("execvp:")


def test_exit_statuses_are_reported(tmp_path):
    producer = _script(tmp_path, "producer", "echo hi")
    failing = _script(tmp_path, "failing", "cat > /dev/null\nexit 4")
    assert handle_pipeline(f"{producer} | {failing}") == [0, 4]


def test_empty_pipeline_runs_nothing():
    assert handle_pipeline("|") == []