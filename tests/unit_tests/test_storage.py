import json
import os

import pytest

from scorekeeper import storage
from scorekeeper.engine.keeper import ScoreKeeper


def _payload(name="Alice", tokens=("x", "3")):
    keeper = ScoreKeeper.new(name)
    for token in tokens:
        keeper.record(token)
    return keeper.to_dict()


def test_write_creates_directory_and_file(tmp_path):
    data_dir = str(tmp_path / "nested" / "data")
    path = storage.write_record(_payload(), data_dir)
    assert path == os.path.join(data_dir, "Alice.json")
    with open(path, encoding="utf-8") as fh:
        saved = json.load(fh)
    assert saved["pins"][:3] == ["X", "yet", "3"]
    assert saved["cursor"] == 3


def test_write_then_read_then_load(tmp_path):
    payload = _payload()
    path = storage.write_record(payload, str(tmp_path))
    raw = storage.read_record(path)
    assert raw == payload
    assert ScoreKeeper.load(raw).to_dict() == payload


def test_write_overwrites_same_name(tmp_path):
    storage.write_record(_payload(tokens=("x",)), str(tmp_path))
    storage.write_record(_payload(tokens=("4", "5")), str(tmp_path))
    assert storage.list_records(str(tmp_path)) == [str(tmp_path / "Alice.json")]
    assert storage.read_record(str(tmp_path / "Alice.json"))["cursor"] == 2


def test_list_records_only_json_files(tmp_path):
    for name in ("Bob", "Alice"):
        storage.write_record(_payload(name), str(tmp_path))
    (tmp_path / "notes.txt").write_text("hello", encoding="utf-8")
    (tmp_path / "old.json").mkdir()
    assert storage.list_records(str(tmp_path)) == [
        str(tmp_path / "Alice.json"),
        str(tmp_path / "Bob.json"),
    ]


def test_list_records_missing_directory(tmp_path):
    assert storage.list_records(str(tmp_path / "missing")) == []


def test_read_missing_file(tmp_path):
    with pytest.raises(storage.StorageError):
        storage.read_record(str(tmp_path / "nobody.json"))


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", '"Alice"'])
def test_read_rejects_non_records(tmp_path, content, caplog):
    path = tmp_path / "broken.json"
    path.write_text(content, encoding="utf-8")
    with caplog.at_level("ERROR"):
        with pytest.raises(storage.StorageError):
            storage.read_record(str(path))
    assert "broken.json" in caplog.text


def test_write_into_a_file_path_fails(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(storage.StorageError):
        storage.write_record(_payload(), str(blocker / "data"))
