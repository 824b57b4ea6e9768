# rustdrills

A Python library for working through small Rust exercises. It reads a list
of exercises, compiles them with `rustc` (or lints them with Clippy), runs
them or their tests, and tells whether each one has been marked as finished.
It also ships worked Python reference solutions for the exercise topics.

## Requirements

- Python 3.11 or later.
- `rustc` on your `PATH`. Exercises in Clippy mode also need `cargo` with
  Clippy installed.

## The exercise list

`rustdrills.exercise.load_exercises(path)` reads a TOML file (by default
`info.toml`) with one `[[exercises]]` table per exercise. Each has a `name`,
a `path` to the exercise source, a `mode` (`compile`, `test` or `clippy`)
and a `hint`:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable with `let`."
```

A missing key raises `ValueError`.

## Exercises

`Exercise` holds `name`, `path`, `mode` (a `Mode`: `COMPILE`, `TEST` or
`CLIPPY`) and `hint`; `str(exercise)` is its path.

- `Exercise.compile()` builds the exercise into a temporary executable in the
  current directory (`./temp_<pid>_<thread>`). In test mode it is built as a
  test harness. In Clippy mode it writes `./exercises/clippy/Cargo.toml`,
  builds the executable, runs `cargo clean` and then
  `cargo clippy -- -D warnings`. On failure it removes the executable and
  raises `CompilationError`, whose `output` holds the captured `stdout` and
  `stderr`. On success it returns a `CompiledExercise`.
- `CompiledExercise.run()` runs the executable (with `--show-output` in test
  mode) and returns an `ExerciseOutput`; a non-zero exit raises
  `ExecutionError` carrying the output. Use it as a context manager, or call
  `close()`, to remove the executable.
- `Exercise.state()` returns a `State`. An exercise is pending while its
  source has a comment line reading `// I AM NOT DONE`; the state then holds
  the marker line and up to two lines on either side as `ContextLine`
  entries (`line`, `number`, `important`). `State.done()` is true when there
  is no such marker, and `Exercise.looks_done()` is a shortcut for it.

```python
from rustdrills.exercise import load_exercises, CompilationError

for exercise in load_exercises("info.toml"):
    try:
        with exercise.compile() as compiled:
            print(compiled.run().stdout)
    except CompilationError as err:
        print(err.output.stderr)
```

## Verifying

`rustdrills.verify.verify(exercises, verbose)` checks the exercises in
order: test exercises are compiled and their tests run, compile exercises are
compiled and run, Clippy exercises are compiled and linted. It reports each
step on the terminal and raises `ExerciseFailed` (with the `exercise`
attribute) at the first one that fails or is still pending; for a pending
exercise it prints the lines around the marker. With `verbose`, the output of
passing tests is shown.

`rustdrills.verify.test(exercise, verbose)` compiles and runs a single test
exercise without checking the marker, raising `ExerciseFailed` on failure.
`prompt_for_completion(exercise, prompt_output)` returns `True` for a
finished exercise and otherwise prints the completion notice and the context
lines, returning `False`.

## Output

`rustdrills.ui` provides `warn` and `success` messages and `bold`, `blue`,
`red` and `green` styling. Colours are used only when standard output is a
terminal, and are switched off by `NO_COLOR`, `CLICOLOR=0` or `TERM=dumb`
and forced on by `CLICOLOR_FORCE`. Set `NO_EMOJI` to replace emoji with plain
characters.

## Reference solutions

The `rustdrills.solutions` subpackage holds worked versions of the exercise
topics:

- `as_ref_mut`, `from_into`, `from_str`, `try_from_into` – counting and
  converting values
- `branching`, `functions`, `strings`, `quizzes` – basics
- `error_handling`, `advanced_errors` – custom error types
- `iterators`, `containers`, `move_semantics` – sequences and mappings
- `smart_pointers`, `threads` – shared data, worker threads and a cons list
- `enums`, `generics`, `traits` – message types, generic containers and
  single dispatch

## What this package does not do

There is no command-line program: no `verify`, `watch`, `run`, `hint` or
`list` command, no watching of files for changes and no progress listing.
Those tasks are left to code that calls the library functions above.