#!/usr/bin/env python3

"""
usage: wc.py [-h] [-l] [-w] [-c | -m] [FILE ...]

count lines and words and bytes or characters

positional arguments:
  FILE         a file to examine (default: stdin)

options:
  -h, --help   show this help message and exit
  -l, --lines  count lines
  -w, --words  count words
  -c, --bytes  count bytes
  -m, --chars  count characters

quirks:
  acts like 'wc -lwc' if called without options, same as bash 'wc'
  counts a last line that doesn't end with a line end, unlike bash 'wc -l'
  counts each run of unicode whitespace as a break between words
  leaves out the count of a file not encoded as utf-8, but says why in stderr

unsurprising quirks:
  prompts Tty Stdin, like Mac 'grep -R .', unlike Bash 'wc'
  takes '-' as meaning stdin, like Linux 'wc -', and doesn't print its name
  adds a 'total' line when given more than one file, even if some can't be read

examples:
  wc.py bin/wc.py  # count lines, words, and bytes
  wc.py -l bin/*.py  # count lines of each file, and in total
  echo 'Hello Wc World' |wc.py -wm  # count words and characters of stdin
"""


import collections
import sys

import argdoc
import linesource


WcConfig = collections.namedtuple("WcConfig", "files lines words bytes_ chars".split())

FileInfo = collections.namedtuple(
    "FileInfo", "num_lines num_words num_bytes num_chars".split()
)


def main(argv):
    """Run from the command line"""

    args = argdoc.parse_args(argv[1:], doc=__doc__)
    config = wc_config_from_args(args)

    linesource.prompt_tty_stdin(config.files)

    # Count each file, and count up the total

    total = FileInfo(0, 0, 0, 0)

    exit_status = 0
    for path in config.files:
        try:
            with linesource.open_source(path) as source:
                info = count(source.records())
        except linesource.LineSourceError as exc:
            linesource.stderr_print(
                "wc.py: error: {}: {}".format(type(exc).__name__, exc)
            )
            exit_status = 1

            continue

        name = None if (path == "-") else path
        print(format_row(info, config=config, name=name))

        total = FileInfo(*(a + b for (a, b) in zip(total, info)))

    if len(config.files) > 1:
        print(format_row(total, config=config, name="total"))

    return exit_status


def wc_config_from_args(args):
    """Choose which counts to show, and default to 'wc -lwc' when none chosen"""

    files = tuple(args.files) if args.files else ("-",)

    lines = bool(args.lines)
    words = bool(args.words)
    bytes_ = bool(args.bytes)
    chars = bool(args.chars)

    if not (lines or words or bytes_ or chars):
        lines = True
        words = True
        bytes_ = True

    return WcConfig(files, lines=lines, words=words, bytes_=bytes_, chars=chars)


def count(records):
    """Count the lines, words, bytes, and characters of some Line Records"""

    num_lines = 0
    num_words = 0
    num_bytes = 0
    num_chars = 0

    for record in records:
        num_lines += 1
        num_words += len(record.text.split())
        num_bytes += len(record.raw)
        num_chars += len(record.text)

    info = FileInfo(num_lines, num_words, num_bytes=num_bytes, num_chars=num_chars)

    return info


def format_row(info, config, name):
    """Form one line of counts, maybe closed by a name"""

    row = ""
    row += format_field(info.num_lines, show=config.lines)
    row += format_field(info.num_words, show=config.words)
    row += format_field(info.num_bytes, show=config.bytes_)
    row += format_field(info.num_chars, show=config.chars)

    if name is not None:
        row += " {}".format(name)

    return row


def format_field(value, show):
    """Right-justify a count into eight columns, or show nothing"""

    if show:

        return "{:>8}".format(value)

    return ""


if __name__ == "__main__":
    with linesource.BrokenPipeErrorSink():
        sys.exit(main(sys.argv))
