#!/usr/bin/env python3

r"""
usage: uniq.py [-h] [-c] [IN_FILE] [OUT_FILE]

drop each line that repeats the line just before it

positional arguments:
  IN_FILE     the file to read (default: stdin)
  OUT_FILE    the file to write (default: stdout)

options:
  -h, --help  show this help message and exit
  -c, --count  tell how many times each line came in a row, at the left of the line

quirks:
  takes "a\r\n" as a repeat of "a\n", but copies out only the first as it came
  doesn't add "\n" to the last line, if the last line came without it
  pads the count to four columns and a space, via "{:>4} ", same as mac "uniq -c"

unsurprising quirks:
  prompts for stdin, like mac bash "grep -R .", unlike bash "uniq"
  takes file "-" as meaning stdin, like linux "uniq -"
  quits at the first file it can't read or write

examples:
  uniq.py -  # drop each line that repeats the line before
  sort bin/*.py |uniq.py -c - |sort -n |tail  # count the most common lines
  uniq.py -c a.txt b.txt  # count the runs of lines of a, and write them into b
"""


import collections
import sys

import argdoc
import linesource


UniqConfig = collections.namedtuple("UniqConfig", "in_file out_file count".split())


def main(argv):
    """Run from the command line"""

    args = argdoc.parse_args(argv[1:], doc=__doc__)
    config = uniq_config_from_args(args)

    linesource.prompt_tty_stdin([config.in_file])

    try:
        uniq_file(config)
    except linesource.LineSourceError as exc:
        linesource.stderr_print(
            "uniq.py: error: {}: {}".format(type(exc).__name__, exc)
        )

        return 1

    return 0


def uniq_config_from_args(args):
    """Take stdin when no input file, and stdout when no output file"""

    in_file = args.in_file if args.in_file else "-"

    return UniqConfig(in_file, out_file=args.out_file, count=bool(args.count))


def uniq_file(config):
    """Copy out the runs of lines of one input file, as they end"""

    with linesource.open_source(config.in_file) as source:
        with linesource.open_sink(config.out_file) as outgoing:
            for chars in uniq_lines(source.lines(), count=config.count):
                outgoing.write(chars)


def uniq_lines(lines, count):
    """Yield one line for each run of equal lines, but only as each run ends"""

    pending = None
    pending_count = 0

    for line in lines:
        if pending is not None:
            if linesource.strip_line_end(line) != linesource.strip_line_end(pending):
                yield format_run(pending, pending_count=pending_count, count=count)
                pending = None

        if pending is None:
            pending = line
            pending_count = 0

        pending_count += 1

    if pending is not None:
        yield format_run(pending, pending_count=pending_count, count=count)


def format_run(line, pending_count, count):
    """Form the line that stands for a run of equal lines"""

    if count:

        return "{:>4} {}".format(pending_count, line)

    return line


if __name__ == "__main__":
    with linesource.BrokenPipeErrorSink():
        sys.exit(main(sys.argv))
