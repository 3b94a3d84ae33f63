import cube_solver
from main import create_arg_parser, main


def test_positional_words_form_the_algorithm(capsys):
    assert main(["R", "U", "U'", "R'"]) == 0
    out = capsys.readouterr().out
    assert "Found 1 solutions with 0 reorients (4 STM)." in out
    assert out.endswith("R U U' R'\n")


def test_alg_option_and_sticker_notation(capsys):
    assert main(["--alg", "R U", "--sticker-notation"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "R 23I:B U"


def test_notation_error_is_output_not_failure(capsys):
    assert main(["--alg", "R Q"]) == 0
    assert capsys.readouterr().out == "unknown move 'Q'\n"


def test_invalid_depth_is_a_usage_error(capsys):
    assert main(["R", "--max-depth", "9"]) == 2
    assert "max depth" in capsys.readouterr().err


def test_parser_defaults():
    args = create_arg_parser().parse_args([])
    assert args.alg_words == []
    assert args.alg is None
    assert args.max_depth == 5
    assert not args.show_all
    assert not args.gui


def test_search_failure_exits_with_one(capsys, monkeypatch):
    def overflow(*args, **kwargs):
        raise OverflowError("a solution holds at most 7 reorientations")

    monkeypatch.setattr(cube_solver, "iddfs", overflow)
    assert main(["R", "U"]) == 1
    assert capsys.readouterr().out == "Search failed: a solution holds at most 7 reorientations\n"
