# ferrolearn

ferrolearn holds the logic behind an interactive, bilingual (Spanish and
English) course for learning Rust:

- **Course content models** (`ferrolearn.models`): `Lesson`, `Exercise`,
  `Module`, `Project`, `UserProgress` and the content blocks `TextBlock`,
  `CodeBlock`, `CalloutBlock` and `QuizBlock`. Each top-level model has
  `from_dict` and `to_dict`; blocks go through `parse_content_block` and
  `content_block_to_dict`. Malformed data raises `ValueError`.
- **A content directory** (`ferrolearn.content.ContentDir`) with `load`,
  `list_dir` and `list_dir_json`. A path that resolves outside the directory
  raises `AccessDeniedError`; other read failures raise `ContentError`.
- **Progress storage** in SQLite (`ferrolearn.db.init_db`,
  `ferrolearn.progress_store`). Every save counts as one more attempt; saving
  with status `"completed"` stamps `completed_at`, and a stored completion
  time is kept by later saves.
- **Compiling and running code** (`ferrolearn.compiler`):
  `compile_and_run` uses a local `rustc` (timeout 10 seconds by default),
  `playground_execute` and `clippy_check` use the online Rust Playground, and
  `compile_and_run_hybrid` tries the Playground first and falls back to the
  local `rustc`. Failures raise `CompilerError`. `check_rust_available`
  reports whether `rustc --version` runs.
- **A playground session** (`ferrolearn.playground.Playground`) holding the
  code, last output, error flag, execution time and compiler mode, with
  `run`, `run_clippy`, `clear`, `toggle` and `close`.
- **Compiler output analysis** (`ferrolearn.output`): `extract_error_codes`,
  `parse_output_segments` (lines classified as error header, location, help,
  warning, note or normal), `explain_error` for E0382, E0502, E0308, E0425,
  E0384 and E0106, and `evaluate_output` comparing output with the expected
  output, ignoring surrounding whitespace.
- **Interface helpers**: `ferrolearn.locale.Locale`,
  `ferrolearn.translations.get_translations`, badges, progress rings, loading
  text and Markdown rendering with tables and strikethrough
  (`ferrolearn.widgets`), quiz state (`ferrolearn.quiz.Quiz`), and sidebar
  entries, route matching, lesson paging and shell state
  (`ferrolearn.navigation`).

## Installation

```
pip install ferrolearn
```

## Command line

```
ferrolearn --help
```

`ferrolearn` runs one backend command and prints its result as JSON:

```
ferrolearn load_content --args '{"path": "theory/intro.toml"}' --content-dir content
ferrolearn save_progress --args '{"id": "m01_l01", "category": "lesson", "status": "completed", "score": 100}'
ferrolearn get_all_progress
```

The commands are `compile_and_run`, `compile_and_run_hybrid`, `clippy_check`,
`check_rust_available`, `get_progress`, `save_progress`, `get_all_progress`,
`load_content` and `list_content_dir`. Arguments are given with `--args` as a
JSON object.

`--data-dir` chooses where the `rust_for_everyone.db` database is kept; by
default it is a `ferrolearn` directory under the platform's application data
location. `--content-dir` chooses the content directory; by default a
`content/` directory is looked for in the current directory, then in its
parent, and otherwise assumed to sit next to the running program.

On an error the command prints `error: ...` to standard error and exits with
status 1.

## Library use

```python
from ferrolearn.locale import Locale
from ferrolearn.translations import get_translations
from ferrolearn.output import extract_error_codes, explain_error

tr = get_translations(Locale.EN)
print(tr.nav_dashboard)            # "Dashboard"

stderr_text = "error[E0382]: borrow of moved value: `s`"
for code in extract_error_codes(stderr_text):
    explanation = explain_error(code, Locale.ES)
    if explanation is not None:
        print(explanation.what)
```

Saving and reading progress:

```python
from ferrolearn.db import init_db
from ferrolearn.progress_store import save_progress, get_progress

db = init_db("progress.db")
save_progress(db, "m01_l01", "lesson", "completed", 100)
print(get_progress(db, "m01_l01", None))
db.close()
```

Running code:

```python
from ferrolearn.compiler import compile_and_run_hybrid

result = compile_and_run_hybrid('fn main() { println!("Hello"); }')
print(result.mode, result.success, result.stdout)
```

A whole backend can be driven from Python as well:

```python
from ferrolearn.app import create_backend

with create_backend("data", "content") as backend:
    print(backend.invoke("list_content_dir", {"path": "theory"}))
```

## What it does not do

ferrolearn has no graphical interface: there are no windows, pages or code
editor. The helpers in `ferrolearn.widgets`, `ferrolearn.quiz`,
`ferrolearn.output` and `ferrolearn.navigation` return text, CSS class
strings, SVG and HTML markup and state for an interface to display. It ships
no course content; the content directory must be provided. The database also
gets `user_settings` and `user_notes` tables, but nothing in the package reads
or writes them.

## Running the tests

```
pip install ferrolearn[test]
pytest
```