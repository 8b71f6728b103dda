"""Store: load/save/append against the backing file."""

import pytest

from mdtodo.errors import PersistenceError
from mdtodo.lib import config
from mdtodo.task import store
from mdtodo.task.document import TaskDocument, unfinished_index


def test_load_missing_file_is_absent(todo_file):
    assert store.load(todo_file) is None


def test_load_empty_file_is_absent(todo_file):
    todo_file.write_text("")
    assert store.load(todo_file) is None


def test_load_preserves_terminators(todo_file):
    todo_file.write_bytes("# Todo\r\n- [ ] a\n\n- [x] b".encode("utf-8"))

    doc = store.load(todo_file)

    assert doc.path == todo_file
    assert doc.lines == ["# Todo\r\n", "- [ ] a\n", "\n", "- [x] b"]


def test_load_directory_raises(tmp_path):
    with pytest.raises(PersistenceError):
        store.load(tmp_path)


def test_round_trip_is_byte_identical(todo_file):
    """Contract: save(load(path)) reproduces the file exactly."""
    original = "# Groceries\r\n\n  - [ ] milk\n- [x] eggs\r\n\tnotes: ünïcode\n- [ ] no newline"
    todo_file.write_bytes(original.encode("utf-8"))

    store.save(store.load(todo_file))

    assert todo_file.read_bytes() == original.encode("utf-8")


def test_save_absent_document_is_noop(todo_file):
    store.save(None)
    assert not todo_file.exists()


def test_save_overwrites(todo_file):
    todo_file.write_bytes("- [ ] old\n- [ ] older\n".encode("utf-8"))
    store.save(TaskDocument(path=todo_file, lines=["- [x] new\n"]))
    assert todo_file.read_text() == "- [x] new\n"


def test_save_unwritable_raises(tmp_path):
    doc = TaskDocument(path=tmp_path / "missing" / "todo.md", lines=["- [ ] a\n"])
    with pytest.raises(PersistenceError) as exc:
        store.save(doc)
    assert "writing" in str(exc.value)


def test_append_creates_file(todo_file):
    store.append(todo_file, "- [ ] first\n")
    store.append(todo_file, "- [ ] second\n")
    assert todo_file.read_text() == "- [ ] first\n- [ ] second\n"


def test_append_unwritable_raises(tmp_path):
    with pytest.raises(PersistenceError):
        store.append(tmp_path / "missing" / "todo.md", "- [ ] a\n")


def test_long_line_kept_by_default(todo_file, caplog):
    long_line = "- [ ] " + "x" * 300 + "\n"
    todo_file.write_bytes(long_line.encode("utf-8"))

    with caplog.at_level("WARNING"):
        doc = store.load(todo_file)

    assert doc.lines == [long_line]
    assert "kept intact" in caplog.text


def test_long_line_truncated_when_configured(todo_file, isolated_config):
    isolated_config.mkdir(parents=True)
    (isolated_config / "config.yaml").write_text("max_line_length: 10\nlong_lines: truncate\n")
    config.clear_cache()
    todo_file.write_bytes("- [ ] abcdefghij\r\n- [ ] ok\n".encode("utf-8"))

    doc = store.load(todo_file)

    assert doc.lines == ["- [ ] abcd\r\n", "- [ ] ok\n"]


def test_round_trip_keeps_undecodable_bytes(todo_file):
    """Contract: non-UTF-8 passthrough bytes survive load and save."""
    todo_file.write_bytes(b"# caf\xe9\n- [ ] a\n")

    doc = store.load(todo_file)
    store.save(doc)

    assert len(doc.lines) == 2
    assert todo_file.read_bytes() == b"# caf\xe9\n- [ ] a\n"


def test_append_after_undecodable_bytes(todo_file):
    todo_file.write_bytes(b"- [ ] r\xe9sum\xe9")
    doc = store.load(todo_file)

    store.save(doc)
    store.append(todo_file, "\n- [ ] next\n")

    assert todo_file.read_bytes() == b"- [ ] r\xe9sum\xe9\n- [ ] next\n"


def test_bare_carriage_return_does_not_split_lines(todo_file):
    """Boundary: only \\n ends a line; a lone \\r stays inside it."""
    todo_file.write_bytes(b"- [ ] a\r- [ ] b\n- [x] c\r\n")

    doc = store.load(todo_file)

    assert doc.lines == ["- [ ] a\r- [ ] b\n", "- [x] c\r\n"]
    assert unfinished_index(doc) == [0]
    store.save(doc)
    assert todo_file.read_bytes() == b"- [ ] a\r- [ ] b\n- [x] c\r\n"
