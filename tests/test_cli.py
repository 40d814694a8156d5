from bsqsolver.cli import generate_map, main, run_file, run_generator


def test_generate_map_cycles_pattern_across_rows():
    assert generate_map(2, "o..") == "o.\n.o\n"


def test_generate_map_shape():
    text = generate_map(5, "..o")
    lines = text.split("\n")
    assert lines[-1] == ""
    assert [len(line) for line in lines[:-1]] == [5] * 5


def test_run_file_valid(tmp_path, capsys):
    buffer = "3\n...\n...\n...\n"
    path = tmp_path / "map.txt"
    path.write_text(buffer)
    assert run_file(str(path)) == 0
    assert capsys.readouterr().out == buffer.split("\n", 1)[1].replace(".", "x")


def test_run_file_missing(tmp_path, capsys):
    assert run_file(str(tmp_path / "absent")) == 84
    assert capsys.readouterr().out == "Error file\n"


def test_run_file_empty(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert run_file(str(path)) == 84
    assert capsys.readouterr().out == "Error file\n"


def test_run_file_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("3\n...\n..\n...\n")
    assert run_file(str(path)) == 84
    assert capsys.readouterr().out == "Error file\n"


def test_run_generator_valid(capsys):
    assert run_generator("3", "...") == 0
    assert capsys.readouterr().out == generate_map(3, "...").replace(".", "x")


def test_run_generator_rejects_bad_pattern(capsys):
    assert run_generator("3", "ab") == 84
    assert capsys.readouterr().out == "Error generating\n"


def test_run_generator_rejects_zero_size(capsys):
    assert run_generator("0", "..") == 84
    assert capsys.readouterr().out == "Error generating\n"


def test_main_argument_counts(capsys):
    assert main([]) == 84
    assert main(["a", "b", "c"]) == 84
    assert capsys.readouterr().out == ""


def test_main_with_file(tmp_path, capsys):
    path = tmp_path / "one.txt"
    path.write_text("1\no.o\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "oxo\n"


def test_main_with_generator(capsys):
    assert main(["4", "o..."]) == 0
    out = capsys.readouterr().out
    assert out.count("o") == generate_map(4, "o...").count("o")
    assert "x" in out