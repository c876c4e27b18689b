from wordgrid.__main__ import main


def _write_words(tmp_path, words):
    path = tmp_path / "words"
    path.write_text("\n".join(words) + "\n")
    return str(path)


def test_cli_prints_words(tmp_path, capsys):
    words = _write_words(tmp_path, ["cat", "cats", "car", "care"])
    assert main(["--dictionary", words, "--board", "ca/ts"]) == 0
    assert capsys.readouterr().out.splitlines() == ["cats"]


def test_cli_paths_and_board_file(tmp_path, capsys):
    words = _write_words(tmp_path, ["cats"])
    board = tmp_path / "board.txt"
    board.write_text("c a\nt s\n")
    assert main(["--dictionary", words, "--board-file", str(board), "--paths"]) == 0
    assert capsys.readouterr().out.splitlines() == ["cats 0,0 0,1 1,0 1,1"]


def test_cli_reports_input_errors(tmp_path, capsys):
    assert main(["--dictionary", str(tmp_path / "missing"), "--board", "ab/cd"]) == 2
    words = _write_words(tmp_path, ["cats"])
    assert main(["--dictionary", words, "--board", "abc/de"]) == 2
    assert capsys.readouterr().out == ""
