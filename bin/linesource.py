"""
read each line of a source, as bytes and as text, and write lines to a sink

a source is a file named by its path, or stdin named by "-"
a sink is a file named by its path, or stdout named by None
"""


import collections
import contextlib
import os
import sys


LineRecord = collections.namedtuple("LineRecord", "raw text".split())


#
# Name each way of failing to read a Source or to write a Sink
#


class LineSourceError(Exception):
    """Fail to read a Source, or to write a Sink, and say which one and why"""

    def __init__(self, source, cause):
        super().__init__(source, cause)
        self.source = source
        self.cause = cause

    def __str__(self):
        return "{}: {}".format(self.source, self.cause)


class SourceUnavailable(LineSourceError):
    """Fail to open a Source, such as when missing or forbidden"""


class ReadFailure(LineSourceError):
    """Fail after opening a Source, such as at bytes not encoded as UTF-8"""


class SinkUnavailable(LineSourceError):
    """Fail to create a Sink"""


def describe_cause(exc):
    """Say why an OSError or UnicodeError happened, without the Path it happened at"""

    strerror = getattr(exc, "strerror", None)
    if strerror:

        return strerror

    return str(exc)


#
# Read the Lines of a Source
#


class LineSource:
    """Yield each Line Record of one Source, in order, only once"""

    def __init__(self, path, incoming):
        self.path = path
        self.incoming = incoming

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        raise NotImplementedError()

    def records(self):
        """Yield each Line Record, as it arrives"""

        return read_records(self.incoming, source=self.path)

    def lines(self):
        """Yield the Text of each Line Record, as it arrives, ending with its line end"""

        for record in self.records():
            yield record.text


class StdinLineSource(LineSource):
    """Read the Lines of Stdin, but leave Stdin open for others"""

    def __init__(self):
        super().__init__("-", incoming=sys.stdin.buffer)

    def close(self):
        self.incoming = None


class FileLineSource(LineSource):
    """Read the Lines of a File, and close it when done"""

    def __init__(self, path):
        try:
            incoming = open(path, "rb")  # pylint: disable=consider-using-with
        except OSError as exc:
            raise SourceUnavailable(path, cause=describe_cause(exc)) from exc

        super().__init__(path, incoming=incoming)

    def close(self):
        if self.incoming is not None:
            self.incoming.close()
            self.incoming = None


def open_source(path):
    """Open a Line Source of Stdin if the Path is "-", else of the File at the Path"""

    if path == "-":

        return StdinLineSource()

    return FileLineSource(path)


def read_records(incoming, source):
    """Yield each Line Record of a binary file, ending each at b"\\n" or at end of file"""

    while True:

        try:
            raw = incoming.readline()
        except OSError as exc:
            raise ReadFailure(source, cause=describe_cause(exc)) from exc

        if not raw:
            break

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ReadFailure(source, cause=describe_cause(exc)) from exc

        yield LineRecord(raw, text=text)


def strip_line_end(text):
    """Drop one "\\n" or "\\r\\n" line end, if present"""

    if text.endswith("\r\n"):

        return text[: -len("\r\n")]

    if text.endswith("\n"):

        return text[: -len("\n")]

    return text

    # such as:  "a\r\n" -> "a", "a\n" -> "a", "a\r" -> "a\r", "a" -> "a"


#
# Write Lines to a Sink
#


@contextlib.contextmanager
def open_sink(path):
    """Yield Stdout if the Path is None, else a new File at the Path, closed when done"""

    if path is None:
        yield sys.stdout

        return

    try:
        outgoing = open(path, "w", encoding="utf-8", newline="")
    except OSError as exc:
        raise SinkUnavailable(path, cause=describe_cause(exc)) from exc

    with outgoing:
        yield outgoing


#
# Define some Python idioms
#


# deffed in many files  # missing from docs.python.org
def prompt_tty_stdin(paths):
    """Prompt once, if about to read Stdin from a Tty"""

    if "-" in paths:
        if sys.stdin.isatty():
            stderr_print("Press ⌃D EOF to quit")


# deffed in many files  # missing from docs.python.org
def stderr_print(*args):
    """Print the Args, but to Stderr, not to Stdout"""

    sys.stdout.flush()
    print(*args, file=sys.stderr)
    sys.stderr.flush()


# deffed in many files  # missing from docs.python.org
class BrokenPipeErrorSink(contextlib.ContextDecorator):
    """Cut unhandled BrokenPipeError down to sys.exit(1)

    Test with large Stdout cut sharply, such as:  wc.py bin/*.py |head -1

    More narrowly than:  signal.signal(signal.SIGPIPE, handler=signal.SIG_DFL)
    As per https://docs.python.org/3/library/signal.html#note-on-sigpipe
    """

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        (_, exc, _) = exc_info
        if isinstance(exc, BrokenPipeError):  # catch this one

            null_fileno = os.open(os.devnull, flags=os.O_WRONLY)
            os.dup2(null_fileno, sys.stdout.fileno())  # avoid the next one

            sys.exit(1)
