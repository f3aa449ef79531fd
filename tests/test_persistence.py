from pathlib import Path

from smartwaste.persistence.filesystem import FileStorage, safe_prefix


def test_file_storage_creates_run_directory(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    run_dir = storage.make_run_directory(prefix="routes_test")

    assert run_dir.exists()
    assert run_dir.is_dir()
    assert run_dir.parent == tmp_path / "outputs"
    assert run_dir.name.startswith("routes_test_")


def test_file_storage_writes_json_and_csv(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    run_dir = storage.save_run("routes_test", {"hello": "world"}, "a,b\n1,2\n")

    assert (run_dir / "summary.json").read_text(encoding="utf-8") == '{\n  "hello": "world"\n}'
    assert (run_dir / "stops.csv").read_text(encoding="utf-8") == "a,b\n1,2\n"


def test_safe_prefix_strips_path_characters() -> None:
    assert safe_prefix("routes ../VH 01") == "routes_VH_01"
    assert safe_prefix("///") == "run"
