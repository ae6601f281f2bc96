#!/usr/bin/env python3

"""
usage: argdoc.py [-h] [FILE]

show the argparse help of a python file, as compiled from its top-of-file usage doc

positional arguments:
  FILE        a python file begun by a usage docstring (default: stdin)

options:
  -h, --help  show this help message and exit

quirks:
  plural args go to an english plural key, such as '[FILE ...]' to '.files'
  options without a metavar count up from zero, as if called with 'action="count"'
  options grouped as '[-b | -n]' in usage can't both be given
  you lose your '-h' and '--help' options if you drop them from your 'options:'

unsurprising quirks:
  prompts for stdin, like mac bash "grep -R .", unlike bash "cat -"
  takes file "-" as meaning stdin

examples:
  argdoc.py -h  # show this help message and exit
  argdoc.py bin/cat.py  # show the help of the parser that 'cat.py' runs
  cat bin/wc.py |argdoc.py  # same, but for 'wc.py' and from stdin
"""


import argparse
import ast
import inspect
import re
import sys

import linesource


def main(argv):
    """Run from the command line"""

    args = parse_args(argv[1:], doc=__doc__)

    path = args.file if args.file else "-"
    linesource.prompt_tty_stdin([path])

    try:
        with linesource.open_source(path) as source:
            pychars = "".join(source.lines())
    except linesource.LineSourceError as exc:
        linesource.stderr_print(
            "argdoc.py: error: {}: {}".format(type(exc).__name__, exc)
        )

        return 1

    doc = ast.get_docstring(ast.parse(pychars), clean=False)
    if doc is None:
        linesource.stderr_print("argdoc.py: error: no docstring atop {}".format(path))

        return 1

    parser = ArgumentParser(doc=doc)
    print(parser.format_help().rstrip())

    return 0


#
# Work with an ArgumentParser compiled from the DocString of the Calling Module
#


def parse_args(args=None, namespace=None, doc=None):
    """
    Call 'argparse.parse_args' on a Parser of the calling Module's DocString

    However,
    + work instead from the given Doc, if any
    + print help and exit zero when Args call for Help
    + print usage and exit 2 when Args don't fit the Doc
    """

    alt_args = sys.argv[1:] if (args is None) else args

    alt_doc = doc
    if alt_doc is None:
        f = inspect.currentframe()
        module = inspect.getmodule(f.f_back)
        alt_doc = module.__doc__

    parser = ArgumentParser(doc=alt_doc)
    alt_namespace = parser.parse_args(alt_args, namespace=namespace)

    return alt_namespace


class ArgumentParser(argparse.ArgumentParser):
    """Form an ArgumentParser with Args and Options and Epilog, from a Doc"""

    def __init__(self, doc):

        paras = textwrap_split_paras(doc)
        if not paras[1:]:
            paras = textwrap_split_paras("usage: prog\n\ndesc")

        # Pick the Usage and the Prog out of the top Para

        usage = " ".join(_.strip() for _ in paras[0])
        assert usage.startswith("usage: "), repr(usage)

        usage_words = usage.split()
        prog = usage_words[1] if usage_words[1:] else "prog"

        # Pick the Description out of the 2nd Para

        description = " ".join(_.strip() for _ in paras[1])

        # Take up all the rest of the Doc as the Epilog

        epilog = None
        epi = epi_from_paras(paras)
        if epi:
            epilog_at = doc.index(epi)
            epilog = doc[epilog_at:].rstrip()

        super().__init__(
            prog=prog,
            usage=usage[len("usage: ") :],
            description=description,
            add_help=doc_lists_help(doc),
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=epilog,
        )

        # Add zero or more Args and/or Options from the Doc

        parser_adds_from_paras(self, paras=paras, usage=usage)


def doc_lists_help(doc):
    """Say True if the Doc lists the conventional '-h, --help' Option, else False"""

    for line in doc.splitlines():
        if line.strip().startswith("-h, --help"):

            return True

    return False


def epi_from_paras(paras):
    """Pick the first Line of the Epilog out of the Paras, else None"""

    alt_paras = paras[2:]  # Skip over Usage and Desc

    if alt_paras and is_args_para(alt_paras[0]):
        alt_paras = alt_paras[1:]

    if alt_paras and is_options_para(alt_paras[0]):
        alt_paras = alt_paras[1:]

    if alt_paras:

        return alt_paras[0][0]

    return None


def is_args_para(para):
    return para[0].startswith("positional arguments")


def is_options_para(para):
    return para[0].startswith("options") or para[0].startswith("optional arguments")


#
# Rip Add_Argument calls out from the Doc
#


def parser_adds_from_paras(parser, paras, usage):
    """Add the Positional Arguments and/or Options listed after Usage and Desc"""

    groups = dict()
    for options in usage_exclusive_options(usage):
        group = parser.add_mutually_exclusive_group()
        for option in options:
            groups[option] = group

    for para in paras[2:]:
        if is_args_para(para):
            for line in textwrap_para_unbreakdent_lines(para[1:]):
                parser_add_arg_line(parser, usage=usage, line=line)
        elif is_options_para(para):
            for line in textwrap_para_unbreakdent_lines(para[1:]):
                parser_add_option_line(parser, line=line, groups=groups)
        else:
            break


def usage_exclusive_options(usage):
    """Find each '[-b | -n]' of Usage, as a List of the Options that exclude each other"""

    options_list = list()
    for chars in re.findall(r"\[(-[^\[\]|]*(?:\|[^\[\]|]*)+)\]", string=usage):
        options = list(_.split()[0] for _ in chars.split("|"))
        options_list.append(options)

    return options_list

    # such as:  "usage: wc.py [-h] [-c | -m]"  ->  [["-c", "-m"]]


def parser_add_arg_line(parser, usage, line):
    """Add one Positional Arg from one Doc Line"""

    words = line.split()
    if not words:

        return

    metavar = words[0]
    help_tail = line.strip()[len(metavar) :].strip()

    dest = metavar.lower()  # Python 3 could '.casefold()'

    # Take mentions of NArgs ?, +, or * from Usage

    nargs = None
    if " {} [{} ...]".format(metavar, metavar) in usage:
        dest = plural_en(dest)
        nargs = "+"  # argparse.ONE_OR_MORE
    elif "[{} ...]".format(metavar) in usage:
        dest = plural_en(dest)
        nargs = "*"  # argparse.ZERO_OR_MORE
    elif "[{}]".format(metavar) in usage:
        nargs = "?"  # argparse.OPTIONAL

    parser.add_argument(
        dest, metavar=metavar, nargs=nargs, help=help_or_none(help_tail)
    )


OPTION_LINE_REGEX = re.compile(
    r"^(?P<options>-[-A-Za-z0-9]+(?: [A-Z_]+)?(?:, -[-A-Za-z0-9]+(?: [A-Z_]+)?)*)"
    r"(?:\s+(?P<help>.*))?$"
)


def parser_add_option_line(parser, line, groups):
    """Add one Option, spelled one way or two ways, from one Doc Line"""

    match = OPTION_LINE_REGEX.match(line.strip())
    if not match:

        return

    option_strings = list()
    metavar = None
    for chars in match.group("options").split(", "):
        words = chars.split()
        option_strings.append(words[0])
        if words[1:]:
            metavar = words[1]

    help_tail = match.group("help") or ""

    # Call victory when Parser Add_Help already did add this Option

    if option_strings == ["-h", "--help"]:
        if parser.add_help:

            return

    # Count up from Zero, unless the Option takes a Metavar

    kwargs = dict(action="count", default=0)
    if metavar:
        kwargs = dict(metavar=metavar, default=None)

    adder = parser
    for option in option_strings:
        if option in groups:
            adder = groups[option]

    adder.add_argument(*option_strings, help=help_or_none(help_tail), **kwargs)


def help_or_none(help_tail):
    """Escape the '%' of Help, so ArgParse doesn't take it as '%(default)s' etc"""

    if not help_tail:

        return None

    return help_tail.replace("%", "%%")


# deffed in many files  # missing from docs.python.org
def plural_en(word):
    """Guess the English plural of a word"""

    if re.match(r"^.*[bcdfghjklmnpqrstvwxz]y$", string=word):
        plural = word[: -len("y")] + "ies"  # entry, entries
    elif re.match(r"^.*(ch|s|sh|x|z)$", string=word):
        plural = word + "es"  # box, boxes
    else:
        plural = word + "s"  # file, files

    return plural


# deffed in many files  # missing from docs.python.org
def textwrap_split_paras(text):
    """Divide the Chars into a List of non-empty Lists of possibly dented Lines"""

    paras = list()

    para = None
    for line in (text + "\n\n").splitlines():
        if not line.strip():
            if para is not None:
                paras.append(para)
            para = None
        elif not para:
            para = [line]
        else:
            para.append(line)

    return paras

    # such as:  "  a\n    b\n\n  c\n"  ->  [['  a', '    b'], ['  c']]


def textwrap_para_unbreakdent_lines(para):
    """Join the continuation lines dented beneath each leading line"""

    lines = list()

    above_dent = None
    for line in para:
        dent = line[: len(line) - len(line.lstrip())]

        if lines and (len(dent) > len(above_dent)):
            lines[-1] += " " + line.strip()

            continue

        lines.append(line)
        above_dent = dent

    return lines

    # such as:  [' a', '    b', ' c']  ->  [' a b', ' c']


if __name__ == "__main__":
    with linesource.BrokenPipeErrorSink():
        sys.exit(main(sys.argv))
