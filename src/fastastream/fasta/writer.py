# This source code is part of the Fastastream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "fastastream.fasta"
__author__ = "The Fastastream contributors"
__all__ = ["DEFAULT_CHARS_PER_LINE", "LINE_BREAK", "format_codes", "write_codes"]

import io
import logging
from numbers import Integral
from ..file import DEFAULT_ENCODING, SinkWriteError, open_sink
from .classify import COMMENT_PREFIX, DESCRIPTION_PREFIX


DEFAULT_CHARS_PER_LINE = 80
LINE_BREAK = "\n"

_logger = logging.getLogger(__name__)


def format_codes(records, chars_per_line=DEFAULT_CHARS_PER_LINE):
    """
    Convert :class:`CodeRecord` objects into FASTA formatted text.

    Parameters
    ----------
    records : iterable of CodeRecord
        The records to be formatted.
        A lazy :class:`CodeSequence` is consumed by this function.
    chars_per_line : int, optional
        The number of codes after which a line break is inserted.

    Returns
    -------
    text : str
        The FASTA text.

    See Also
    --------
    write_codes

    Examples
    --------

    >>> records = parse_lines([">Example header", "ACGT", "ACGT"])
    >>> format_codes(records)
    '\\n\\n>Example header\\nACGTACGT'
    >>> format_codes(CodeSequence(["A" * 5]), chars_per_line=2)
    'AA\\nAA\\nA'
    """
    text = io.StringIO()
    for chunk in _generate_chunks(records, chars_per_line):
        text.write(chunk)
    return text.getvalue()


def write_codes(
    file, records, chars_per_line=DEFAULT_CHARS_PER_LINE, encoding=DEFAULT_ENCODING,
    gzip=None
):
    """
    Write :class:`CodeRecord` objects as FASTA text into the specified
    `file`.

    Each code is written directly to the file, so this function may
    save a large amount of memory, if the `records` are provided as
    lazy sequence.

    Whenever the metadata change flags of a record are set, the
    descriptions (each preceded by an empty line) and comments of that
    record are written in front of its code.
    A line break is inserted after each `chars_per_line` codes.

    Parameters
    ----------
    file : file-like object or str
        The file to be written to.
        Alternatively a file path can be supplied.
        Missing parent directories are created.
    records : iterable of CodeRecord
        The records to be written.
        If they have a ``close()`` method, like a :class:`CodeSequence`
        or a generator, it is called when writing ends, also if writing
        fails.
    chars_per_line : int, optional
        The number of codes after which a line break is inserted.
    encoding : str, optional
        The text encoding for paths and binary file objects.
    gzip : bool, optional
        Whether the output should be GZIP compressed.
        By default, this is deduced from a ``.gz`` suffix of a path.

    Raises
    ------
    SinkWriteError
        If opening, writing to or closing the file fails.
        The file is released in any case.
    """
    # Fail before the file is touched
    _check_chars_per_line(chars_per_line)
    sink, release = open_sink(file, encoding, gzip)
    try:
        for chunk in _generate_chunks(records, chars_per_line):
            _write_chunk(sink, chunk)
    finally:
        try:
            _release_sink(release)
        finally:
            _close_records(records)


def _generate_chunks(records, chars_per_line):
    """
    Yield the text for each completed line of codes.
    Metadata is part of the chunk of the line it precedes.
    """
    _check_chars_per_line(chars_per_line)
    column = 0
    chunk = []
    for record in records:
        if record.description_changed:
            for description in record.descriptions:
                chunk.append(
                    LINE_BREAK + LINE_BREAK + DESCRIPTION_PREFIX + description
                    + LINE_BREAK
                )
        if record.comment_changed:
            comments = (LINE_BREAK + COMMENT_PREFIX).join(record.comments)
            if len(comments.strip()) != 0:
                chunk.append(LINE_BREAK + COMMENT_PREFIX + comments + LINE_BREAK)
        chunk.append(record.symbol)
        column += 1
        if column % chars_per_line == 0:
            chunk.append(LINE_BREAK)
            yield "".join(chunk)
            chunk = []
    if len(chunk) != 0:
        yield "".join(chunk)


def _check_chars_per_line(chars_per_line):
    if not isinstance(chars_per_line, Integral) or chars_per_line < 1:
        raise ValueError(
            f"Number of characters per line must be a positive integer, "
            f"got {chars_per_line!r}"
        )


def _write_chunk(sink, chunk):
    try:
        sink.write(chunk)
    except (OSError, ValueError) as e:
        # 'ValueError' covers encoding errors and closed files
        raise SinkWriteError("Failed to write FASTA sink") from e


def _release_sink(release):
    try:
        release()
    except (OSError, ValueError) as e:
        raise SinkWriteError("Failed to release FASTA sink") from e
    _logger.debug("Released FASTA sink")


def _close_records(records):
    # Lazy input is not read any further
    close = getattr(records, "close", None)
    if close is not None:
        close()
