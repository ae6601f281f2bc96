import pathlib

import pytest

import argdoc


BIN_DIR = pathlib.Path(__file__).resolve().parents[1] / "bin"

DOC = """
usage: p.py [-h] [-v] [-a | -b] [-n COUNT] [WORD ...]

do good stuff

positional arguments:
  WORD                  a word to echo (default: none)

options:
  -h, --help            show this help message and exit
  -v, --verbose         say more, and 100% more if twice
  -a, --alef            choose alef
  -b, --bet-and-then-some
                        choose bet
  -n COUNT, --lines COUNT
                        how many lines

examples:
  p.py -vv hello world
"""


def test_textwrap_split_paras():
    paras = argdoc.textwrap_split_paras("  a\n    b\n\n\n  c\n")

    assert paras == [["  a", "    b"], ["  c"]]


def test_textwrap_para_unbreakdent_lines():
    lines = argdoc.textwrap_para_unbreakdent_lines([" a", "    b", " c"])

    assert lines == [" a b", " c"]


def test_plural_en():
    words = "file entry box word".split()

    plurals = list(argdoc.plural_en(_) for _ in words)

    assert plurals == "files entries boxes words".split()


def test_usage_exclusive_options():
    usage = "usage: wc.py [-h] [-l] [-w] [-c | -m] [FILE ...]"

    assert argdoc.usage_exclusive_options(usage) == [["-c", "-m"]]
    assert argdoc.usage_exclusive_options("usage: p.py [-h] [FILE]") == []


def test_parse_args_of_no_args():
    args = argdoc.parse_args([], doc=DOC)

    assert args.words == []
    assert args.verbose == 0
    assert args.alef == 0
    assert args.bet_and_then_some == 0
    assert args.lines is None


def test_parse_args_counts_options_and_takes_metavars():
    args = argdoc.parse_args("-vv -b -n 5 hello world".split(), doc=DOC)

    assert args.words == ["hello", "world"]
    assert args.verbose == 2
    assert args.bet_and_then_some == 1
    assert args.lines == "5"


def test_parse_args_rejects_exclusive_options(capsys):
    with pytest.raises(SystemExit) as excinfo:
        argdoc.parse_args(["-a", "-b"], doc=DOC)

    assert excinfo.value.code == 2
    assert "not allowed with argument" in capsys.readouterr().err


def test_parse_args_prints_help_from_doc(capsys):
    with pytest.raises(SystemExit) as excinfo:
        argdoc.parse_args(["--help"], doc=DOC)

    assert excinfo.value.code == 0

    out = capsys.readouterr().out
    assert out.startswith("usage: p.py [-h] [-v] [-a | -b] [-n COUNT] [WORD ...]\n")
    assert "do good stuff" in out
    assert "100% more" in out
    assert "examples:\n  p.py -vv hello world" in out


def test_parse_args_of_optional_positionals():
    doc = """
usage: uniq.py [-h] [IN_FILE] [OUT_FILE]

desc

positional arguments:
  IN_FILE     the file to read
  OUT_FILE    the file to write

options:
  -h, --help  show this help message and exit
"""

    args = argdoc.parse_args(["a.txt"], doc=doc)

    assert args.in_file == "a.txt"
    assert args.out_file is None


def test_parser_without_help_option():
    doc = "usage: p.py [-x]\n\ndesc\n\noptions:\n  -x  an x\n"

    parser = argdoc.ArgumentParser(doc=doc)

    assert not parser.add_help
    with pytest.raises(SystemExit):
        parser.parse_args(["-h"])


def test_main_shows_help_of_a_script(capsys):
    status = argdoc.main(["argdoc.py", str(BIN_DIR / "wc.py")])

    assert status == 0

    out = capsys.readouterr().out
    assert out.startswith("usage: wc.py [-h] [-l] [-w] [-c | -m] [FILE ...]\n")
    assert "-m, --chars" in out


def test_main_of_file_without_doc(tmp_path, capsys):
    path = tmp_path / "nodoc.py"
    path.write_text("x = 1\n")

    status = argdoc.main(["argdoc.py", str(path)])

    assert status == 1
    assert "no docstring" in capsys.readouterr().err


def test_main_of_missing_file(tmp_path, capsys):
    status = argdoc.main(["argdoc.py", str(tmp_path / "missing.py")])

    assert status == 1
    assert "SourceUnavailable" in capsys.readouterr().err
