import os
import subprocess
from pathlib import Path

import pytest

from rustdrills.exercise import (
    CompilationError,
    ContextLine,
    ExecutionError,
    Exercise,
    Mode,
    State,
    clean,
    load_exercises,
    temp_file,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"
PENDING_TEST = "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n"


class FakeTools:
    def __init__(self, compile_code=0, run_code=0, run_stdout=b"", compile_stderr=b""):
        self.compile_code = compile_code
        self.run_code = run_code
        self.run_stdout = run_stdout
        self.compile_stderr = compile_stderr
        self.calls = []

    def __call__(self, cmd, *args, **kwargs):
        self.calls.append(list(cmd))
        if cmd[0] in ("rustc", "cargo"):
            return subprocess.CompletedProcess(
                cmd, self.compile_code, b"", self.compile_stderr
            )
        return subprocess.CompletedProcess(cmd, self.run_code, self.run_stdout, b"oops")


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def make_exercise(workdir, name, content, mode=Mode.COMPILE):
    path = workdir / f"{name}.rs"
    path.write_text(content)
    return Exercise(name=name, path=path, mode=mode, hint="")


def test_pending_state(workdir):
    exercise = make_exercise(workdir, "pending_exercise", PENDING)
    expected = State(
        (
            ContextLine("// fake_exercise", 1, False),
            ContextLine("", 2, False),
            ContextLine("// I AM NOT DONE", 3, True),
            ContextLine("", 4, False),
            ContextLine("fn main() {", 5, False),
        )
    )
    assert exercise.state() == expected
    assert exercise.state().done() is False


def test_finished_exercise(workdir):
    exercise = make_exercise(workdir, "finished_exercise", FINISHED)
    assert exercise.state() == State()
    assert exercise.state().done() is True


def test_looks_done(workdir):
    assert make_exercise(workdir, "a", FINISHED).looks_done() is True
    assert make_exercise(workdir, "b", PENDING).looks_done() is False


def test_marker_on_first_line(workdir):
    exercise = make_exercise(workdir, "pending_test_exercise", PENDING_TEST)
    context = exercise.state().context
    assert [c.number for c in context] == [1, 2, 3]
    assert [c.important for c in context] == [True, False, False]


def test_crlf_lines_are_stripped(workdir):
    exercise = make_exercise(workdir, "crlf", PENDING.replace("\n", "\r\n"))
    assert exercise.state().context[2] == ContextLine("// I AM NOT DONE", 3, True)


def test_temp_file_is_process_specific():
    assert temp_file().startswith(f"./temp_{os.getpid()}_")
    assert temp_file() == temp_file()


def test_clean_removes_temp_file(workdir):
    Path(temp_file()).touch()
    clean()
    assert not Path(temp_file()).exists()


def test_clean(workdir, monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeTools())
    Path(temp_file()).touch()
    exercise = make_exercise(workdir, "example", PENDING)
    compiled = exercise.compile()
    compiled.close()
    assert not Path(temp_file()).exists()


def test_context_manager_cleans(workdir, monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeTools())
    exercise = make_exercise(workdir, "example", PENDING)
    with exercise.compile() as compiled:
        Path(temp_file()).touch()
        assert compiled.exercise is exercise
    assert not Path(temp_file()).exists()


def test_compile_command(workdir, monkeypatch):
    tools = FakeTools()
    monkeypatch.setattr(subprocess, "run", tools)
    exercise = make_exercise(workdir, "example", FINISHED)
    exercise.compile().close()
    assert tools.calls == [
        ["rustc", str(exercise.path), "-o", temp_file(), "--color", "always"]
    ]


def test_test_mode_compiles_harness(workdir, monkeypatch):
    tools = FakeTools()
    monkeypatch.setattr(subprocess, "run", tools)
    exercise = make_exercise(workdir, "t", FINISHED, Mode.TEST)
    exercise.compile().close()
    assert tools.calls[0][:3] == ["rustc", "--test", str(exercise.path)]


def test_compile_failure(workdir, monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeTools(compile_code=1, compile_stderr=b"error: boom"))
    Path(temp_file()).touch()
    exercise = make_exercise(workdir, "compFailure", "fn main() {\n    let\n}\n")
    with pytest.raises(CompilationError) as info:
        exercise.compile()
    assert info.value.output.stderr == "error: boom"
    assert info.value.exercise is exercise
    assert not Path(temp_file()).exists()


def test_exercise_with_output(workdir, monkeypatch):
    tools = FakeTools(run_stdout=b"THIS TEST TOO SHALL PASS\n")
    monkeypatch.setattr(subprocess, "run", tools)
    exercise = make_exercise(workdir, "testSuccess", FINISHED, Mode.TEST)
    with exercise.compile() as compiled:
        out = compiled.run()
    assert "THIS TEST TOO SHALL PASS" in out.stdout
    assert tools.calls[-1] == [temp_file(), "--show-output"]


def test_run_failure(workdir, monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeTools(run_code=101, run_stdout=b"panicked"))
    exercise = make_exercise(workdir, "testNotPassed", FINISHED, Mode.TEST)
    with exercise.compile() as compiled:
        with pytest.raises(ExecutionError) as info:
            compiled.run()
    assert info.value.output.stdout == "panicked"


def test_clippy_writes_manifest(workdir, monkeypatch):
    tools = FakeTools()
    monkeypatch.setattr(subprocess, "run", tools)
    (workdir / "exercises" / "clippy").mkdir(parents=True)
    exercise = make_exercise(workdir, "clippy1", FINISHED, Mode.CLIPPY)
    exercise.compile().close()
    manifest = (workdir / "exercises" / "clippy" / "Cargo.toml").read_text()
    assert 'name = "clippy1"' in manifest
    assert 'path = "clippy1.rs"' in manifest
    assert [call[:2] for call in tools.calls] == [
        ["rustc", str(exercise.path)],
        ["cargo", "clean"],
        ["cargo", "clippy"],
    ]
    assert tools.calls[-1][-3:] == ["-D", "warnings"]


def test_str_is_path(workdir):
    exercise = make_exercise(workdir, "x", FINISHED)
    assert str(exercise) == str(exercise.path)


def test_load_exercises(workdir):
    (workdir / "info.toml").write_text(
        '[[exercises]]\nname = "compSuccess"\npath = "compSuccess.rs"\n'
        'mode = "compile"\nhint = ""\n\n'
        '[[exercises]]\nname = "testFailure"\npath = "testFailure.rs"\n'
        'mode = "test"\nhint = "Hello!"\n'
    )
    exercises = load_exercises(workdir / "info.toml")
    assert [e.name for e in exercises] == ["compSuccess", "testFailure"]
    assert [e.mode for e in exercises] == [Mode.COMPILE, Mode.TEST]
    assert exercises[1].hint == "Hello!"
    assert exercises[0].path == Path("compSuccess.rs")


def test_load_exercises_rejects_bad_mode(workdir):
    (workdir / "info.toml").write_text(
        '[[exercises]]\nname = "a"\npath = "a.rs"\nmode = "bogus"\nhint = ""\n'
    )
    with pytest.raises(ValueError):
        load_exercises(workdir / "info.toml")


def test_load_exercises_rejects_missing_field(workdir):
    (workdir / "info.toml").write_text('[[exercises]]\nname = "a"\n')
    with pytest.raises(ValueError):
        load_exercises(workdir / "info.toml")