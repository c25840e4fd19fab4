import pytest

from paxtables.concat_tables import AppendTables, HeaderMismatchError, concat_tables


def write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def test_two_tables_are_appended(tmp_path):
    write(tmp_path / "a.csv", "id;x\n1;2\n")
    write(tmp_path / "b.csv", "id;x\n3;4\n")
    tables = AppendTables()
    tables.process_file(tmp_path / "a.csv")
    tables.process_file(tmp_path / "b.csv")
    assert tables.text() == "id;x\n1;2\n3;4\n"
    assert tables.json() == {"used-files": 2, "empty-files": 0, "total-files": 2}


def test_missing_final_newline_is_added(tmp_path):
    write(tmp_path / "a.csv", "id;x\n1;2")
    write(tmp_path / "b.csv", "id;x\n3;4")
    tables = AppendTables()
    tables.process_file(tmp_path / "a.csv")
    tables.process_file(tmp_path / "b.csv")
    assert tables.text() == "id;x\n1;2\n3;4\n"


def test_empty_file_is_counted_but_ignored(tmp_path):
    write(tmp_path / "a.csv", "")
    write(tmp_path / "b.csv", "id\n7\n")
    tables = AppendTables()
    tables.process_file(tmp_path / "a.csv")
    tables.process_file(tmp_path / "b.csv")
    assert tables.text() == "id\n7\n"
    assert tables.json() == {"used-files": 1, "empty-files": 1, "total-files": 2}


def test_non_csv_files_are_skipped(tmp_path):
    write(tmp_path / "notes.txt", "hello\n")
    tables = AppendTables()
    tables.process_file(tmp_path / "notes.txt")
    assert tables.text() == ""
    assert tables.json()["total-files"] == 0


def test_header_mismatch_raises(tmp_path):
    write(tmp_path / "a.csv", "id;x\n1;2\n")
    write(tmp_path / "b.csv", "id;y\n3;4\n")
    tables = AppendTables()
    tables.process_file(tmp_path / "a.csv")
    with pytest.raises(HeaderMismatchError, match="Headers do not match"):
        tables.process_file(tmp_path / "b.csv")


def test_directory_mismatch_mentions_directory(tmp_path):
    write(tmp_path / "a.csv", "id;x\n1;2\n")
    write(tmp_path / "b.csv", "other\n3\n")
    with pytest.raises(HeaderMismatchError, match="Processing directory"):
        AppendTables().process_directory(tmp_path)


def test_process_directory_recurses_in_order(tmp_path):
    write(tmp_path / "b.csv", "id\n2\n")
    write(tmp_path / "a.csv", "id\n1\n")
    write(tmp_path / "sub" / "c.csv", "id\n3\n")
    tables = AppendTables()
    tables.process_directory(tmp_path)
    assert tables.text() == "id\n1\n2\n3\n"


def test_missing_directory_raises(tmp_path):
    with pytest.raises(NotADirectoryError):
        AppendTables().process_directory(tmp_path / "nowhere")


def test_concat_tables_saves_result(tmp_path):
    source = tmp_path / "in"
    write(source / "a.csv", "id;v\n1;a\n")
    write(source / "b.csv", "id;v\n2;b\n")
    write(source / "c.csv", "")
    dest = tmp_path / "out.csv"
    result = concat_tables(source, dest)
    with open(dest, encoding="utf-8", newline="") as handle:
        assert handle.read() == "id;v\n1;a\n2;b\n"
    assert result == {"used-files": 2, "empty-files": 1, "total-files": 3}


def test_save_to_bad_location_raises(tmp_path):
    tables = AppendTables()
    with pytest.raises(OSError, match="Trying to save"):
        tables.save(tmp_path / "missing" / "out.csv")