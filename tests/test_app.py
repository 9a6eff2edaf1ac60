import json
import subprocess
from unittest.mock import patch

import pytest

from ferrolearn.app import DB_FILENAME, create_backend, main, resolve_content_dir


@pytest.fixture
def content(tmp_path):
    root = tmp_path / "content"
    lesson_dir = root / "theory" / "m01"
    lesson_dir.mkdir(parents=True)
    (lesson_dir / "01.toml").write_text('title = "Hola"\n', encoding="utf-8")
    (tmp_path / "outside.txt").write_text("hidden", encoding="utf-8")
    return root


@pytest.fixture
def backend(tmp_path, content):
    with create_backend(tmp_path / "data", content) as b:
        yield b


def test_content_dir_found_in_cwd(tmp_path):
    (tmp_path / "content").mkdir()
    assert resolve_content_dir(tmp_path, tmp_path / "bin" / "app") == tmp_path / "content"


def test_content_dir_found_in_parent(tmp_path):
    (tmp_path / "content").mkdir()
    cwd = tmp_path / "src-tauri"
    cwd.mkdir()
    assert resolve_content_dir(cwd, tmp_path / "bin" / "app") == tmp_path / "content"


def test_content_dir_falls_back_to_executable(tmp_path):
    cwd = tmp_path / "a" / "b"
    cwd.mkdir(parents=True)
    exe = tmp_path / "bin" / "app"
    assert resolve_content_dir(cwd, exe) == exe.parent / "content"


def test_create_backend_makes_database(tmp_path, content):
    with create_backend(tmp_path / "data", content):
        pass
    assert (tmp_path / "data" / DB_FILENAME).is_file()


def test_progress_round_trip(backend):
    assert backend.invoke("get_progress", {"id": "m01"}) is None
    backend.invoke(
        "save_progress", {"id": "m01", "category": "lesson", "status": "in_progress", "score": 4}
    )
    backend.invoke(
        "save_progress", {"id": "m01", "category": "lesson", "status": "completed", "score": 9}
    )
    record = backend.invoke("get_progress", {"id": "m01", "category": "lesson"})
    assert record["status"] == "completed"
    assert record["score"] == 9
    assert record["attempts"] == 2
    assert record["completed_at"] == record["updated_at"]
    assert [r["id"] for r in backend.invoke("get_all_progress")] == ["m01"]


def test_load_and_list_content(backend):
    assert backend.invoke("load_content", {"path": "theory/m01/01.toml"}) == 'title = "Hola"\n'
    listing = json.loads(backend.invoke("list_content_dir", {"path": "theory"}))
    assert listing == [{"name": "m01", "is_dir": True}]


def test_unknown_command_and_bad_args(backend):
    with pytest.raises(ValueError, match="unknown command"):
        backend.invoke("format_disk")
    with pytest.raises(ValueError, match="invalid arguments"):
        backend.invoke("load_content", {})


def test_check_rust_available_command(backend):
    with patch("subprocess.run", side_effect=FileNotFoundError("rustc")):
        assert backend.invoke("check_rust_available") == {"available": False, "version": None}


def test_compile_command_returns_plain_dict(backend):
    def fake_run(args, **kwargs):
        out = b"" if args[0] == "rustc" else b"ran\n"
        return subprocess.CompletedProcess(args, 0, out, b"")

    with patch("subprocess.run", side_effect=fake_run):
        result = backend.invoke("compile_and_run", {"code": "fn main() {}", "timeout_secs": 2})
    assert result["stdout"] == "ran\n"
    assert result["mode"] == "local"
    assert result["success"] is True


def test_main_prints_json_result(tmp_path, content, capsys):
    code = main(
        [
            "load_content",
            "--args",
            json.dumps({"path": "theory/m01/01.toml"}),
            "--data-dir",
            str(tmp_path / "data"),
            "--content-dir",
            str(content),
        ]
    )
    captured = capsys.readouterr()
    assert code == 0
    assert json.loads(captured.out) == 'title = "Hola"\n'
    assert str(content) in captured.err


def test_main_reports_denied_path(tmp_path, content, capsys):
    code = main(
        [
            "load_content",
            "--args",
            json.dumps({"path": "../outside.txt"}),
            "--data-dir",
            str(tmp_path / "data"),
            "--content-dir",
            str(content),
        ]
    )
    assert code == 1
    assert "Access denied" in capsys.readouterr().err