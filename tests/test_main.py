import main


def test_main_with_local_csv(tmp_path, capsys):
    p = tmp_path / "movies.csv"
    p.write_text(
        "title,plot\n"
        "Heat,\"A thief and a detective: love, death and family.\"\n"
        "Alien,\"The crew fights to survive. Love it!\"\n",
        encoding="utf-8",
    )
    assert main.main([str(p)]) == 0
    out = capsys.readouterr().out
    assert "Total movies loaded: 2" in out
    assert "love" in out
    assert "occurrences=     2  documents=2" in out


def test_main_without_csv_files(monkeypatch, tmp_path):
    monkeypatch.setattr(main, "download_wikipedia_movies_dataset", lambda: str(tmp_path))
    assert main.main([]) == 1
