from bbow import dataset


def test_download_uses_kagglehub(monkeypatch, tmp_path):
    calls = []

    def fake_download(name):
        calls.append(name)
        return str(tmp_path)

    monkeypatch.setattr(dataset.kagglehub, "dataset_download", fake_download)
    assert dataset.download_wikipedia_movies_dataset() == str(tmp_path)
    assert calls == ["exactful/wikipedia-movies"]


def test_find_csv_files(tmp_path):
    (tmp_path / "2010s-movies.csv").write_text("title,plot\n", encoding="utf-8")
    nested = tmp_path / "versions" / "1"
    nested.mkdir(parents=True)
    (nested / "1970s-movies.csv").write_text("title,plot\n", encoding="utf-8")
    (nested / "readme.txt").write_text("x", encoding="utf-8")

    found = dataset.find_csv_files(str(tmp_path))
    assert found == sorted([
        str(tmp_path / "2010s-movies.csv"),
        str(nested / "1970s-movies.csv"),
    ])


def test_find_csv_files_empty(tmp_path):
    assert dataset.find_csv_files(str(tmp_path)) == []
