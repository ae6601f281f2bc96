#!/usr/bin/env python3

r"""
usage: cat.py [-h] [-b | -n] [FILE ...]

copy each line of input to output, numbering the lines if asked

positional arguments:
  FILE                  a file to copy out (default: stdin)

options:
  -h, --help            show this help message and exit
  -b, --number-nonblank
                        number each line of output, except the empty lines
  -n, --number          number each line of output

quirks:
  counts up across all the files, doesn't start the count over at each next file
  ends each line with "\n", even the last line of a file that doesn't
  does print hard "\t" tab after each line number, via "{:6}\t", same as bash "cat -n"
  quits copying a file at its first line not encoded as utf-8

unsurprising quirks:
  prompts for stdin, like mac bash "grep -R .", unlike bash "cat -" and "cat"
  takes file "-" as meaning stdin, like linux "cat -"
  reports a file it can't read, then moves on to copy the next file

examples:
  cat.py -  # copy out each line of input
  cat.py -n bin/cat.py  # number each line of this file
  cat.py -b a.txt - b.txt  # number the non-empty lines of a, then of stdin, then of b
"""


import collections
import sys

import argdoc
import linesource


CatConfig = collections.namedtuple("CatConfig", "files mode".split())

PLAIN = "plain"
NUMBER_ALL = "number_all"
NUMBER_NONBLANK = "number_nonblank"


def main(argv):
    """Run from the command line"""

    args = argdoc.parse_args(argv[1:], doc=__doc__)
    config = cat_config_from_args(args)

    linesource.prompt_tty_stdin(config.files)

    # Catenate each file, but carry the line number on into the next file

    numberer = LineNumberer(mode=config.mode)

    exit_status = 0
    for path in config.files:
        try:
            with linesource.open_source(path) as source:
                cat_lines(source.lines(), numberer=numberer, outgoing=sys.stdout)
        except linesource.LineSourceError as exc:
            linesource.stderr_print(
                "cat.py: error: {}: {}".format(type(exc).__name__, exc)
            )
            exit_status = 1

    return exit_status


def cat_config_from_args(args):
    """Choose one mode of numbering, and stdin when no files"""

    files = tuple(args.files) if args.files else ("-",)

    mode = PLAIN
    if args.number_nonblank:
        mode = NUMBER_NONBLANK
    elif args.number:
        mode = NUMBER_ALL

    return CatConfig(files, mode=mode)


def cat_lines(lines, numberer, outgoing):
    """Copy out each line as it arrives"""

    for line in lines:
        outgoing.write(numberer.format_line(line))


class LineNumberer:
    """Number each line, or each non-empty line, or no line"""

    def __init__(self, mode):
        self.mode = mode
        self.next_number = 1

    def format_line(self, line):
        """Form one line of output from one line of input"""

        chars = linesource.strip_line_end(line)

        if self.mode == PLAIN:

            return chars + "\n"

        if (self.mode == NUMBER_NONBLANK) and not chars:

            return "\n"

        numbered = "{:6}\t{}\n".format(self.next_number, chars)
        self.next_number += 1

        return numbered


if __name__ == "__main__":
    with linesource.BrokenPipeErrorSink():
        sys.exit(main(sys.argv))
