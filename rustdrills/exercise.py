"""Exercise descriptions, compilation, execution and completion state."""

from __future__ import annotations

import contextlib
import enum
import os
import re
import subprocess
import threading
import tomllib
import weakref
from dataclasses import dataclass
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary executable name unique to this process and thread."""
    thread_id = "".join(
        c for c in f"ThreadId({threading.get_ident()})" if c.isalnum()
    )
    return f"./temp_{os.getpid()}_{thread_id}"


def _remove_quietly(path: str) -> None:
    with contextlib.suppress(OSError):
        os.remove(path)


def clean() -> None:
    """Remove the temporary executable, if any."""
    _remove_quietly(temp_file())


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a command."""

    stdout: str
    stderr: str


class CompilationError(Exception):
    """The exercise failed to compile or lint."""

    def __init__(self, exercise: "Exercise", output: ExerciseOutput):
        super().__init__(f"compilation of {exercise} failed")
        self.exercise = exercise
        self.output = output


class ExecutionError(Exception):
    """The compiled exercise exited unsuccessfully."""

    def __init__(self, exercise: "Exercise", output: ExerciseOutput):
        super().__init__(f"running {exercise} failed")
        self.exercise = exercise
        self.output = output


def _capture(command: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(command, capture_output=True, check=False)


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
    )


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


@dataclass
class Exercise:
    """One exercise as described in the exercise list."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def _write_clippy_manifest(self) -> None:
        manifest = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2018"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        message = (
            "Failed to write 📎 Clippy 📎 Cargo.toml file."
            if "NO_EMOJI" not in os.environ
            else "Failed to write Clippy Cargo.toml file."
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(manifest, encoding="utf-8")
        except OSError as exc:
            raise OSError(message) from exc

    def compile(self) -> "CompiledExercise":
        """Compile (or lint) the exercise; raise CompilationError on failure."""
        source = str(self.path)
        executable = temp_file()
        if self.mode is Mode.COMPILE:
            result = _capture(["rustc", source, "-o", executable, *RUSTC_COLOR_ARGS])
        elif self.mode is Mode.TEST:
            result = _capture(
                ["rustc", "--test", source, "-o", executable, *RUSTC_COLOR_ARGS]
            )
        else:
            self._write_clippy_manifest()
            # Build an executable as well so clippy exercises can be run.
            _capture(["rustc", source, "-o", executable, *RUSTC_COLOR_ARGS])
            # A clean is needed for clippy to report every lint.
            _capture(
                ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                 *RUSTC_COLOR_ARGS]
            )
            result = _capture(
                ["cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                 *RUSTC_COLOR_ARGS, "--", "-D", "warnings"]
            )
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompilationError(self, _output(result))

    def state(self) -> State:
        """Inspect the source for the pending marker."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError(f"pending marker in {self} spans several lines")
        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines[low : high + 1], start=low)
            )
        )

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed."""
        return self.state().done()

    def __str__(self) -> str:
        return str(self.path)


class CompiledExercise:
    """A successfully compiled exercise; its executable is removed on close."""

    def __init__(self, exercise: Exercise):
        self.exercise = exercise
        self._finalizer = weakref.finalize(self, _remove_quietly, temp_file())

    def run(self) -> ExerciseOutput:
        """Run the executable; raise ExecutionError if it fails."""
        arg = "--show-output" if self.exercise.mode is Mode.TEST else ""
        result = _capture([temp_file(), arg])
        output = _output(result)
        if result.returncode != 0:
            raise ExecutionError(self.exercise, output)
        return output

    def close(self) -> None:
        self._finalizer()

    def __enter__(self) -> "CompiledExercise":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def load_exercises(path="info.toml") -> list[Exercise]:
    """Read the exercise list from a TOML file."""
    with open(path, "rb") as fh:
        data = tomllib.load(fh)
    try:
        return [
            Exercise(
                name=entry["name"],
                path=Path(entry["path"]),
                mode=Mode(entry["mode"]),
                hint=entry["hint"],
            )
            for entry in data["exercises"]
        ]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"invalid exercise list in {path}: {exc}") from exc