# This source code is part of the Fastastream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "fastastream.fasta"
__author__ = "The Fastastream contributors"
__all__ = [
    "AccumulatorState",
    "MetadataAccumulator",
    "CodeSequence",
    "parse_lines",
    "read_codes",
]

import enum
import logging
import zlib
from ..file import DEFAULT_ENCODING, SourceReadError, open_source
from ..record import Code, CodeRecord, Metadata
from .classify import LineType, classify_line


_logger = logging.getLogger(__name__)

# Failures of reading, decoding or decompressing a source
_READ_ERRORS = (OSError, EOFError, UnicodeDecodeError, zlib.error)


class AccumulatorState(enum.Enum):
    """
    The states of a :class:`MetadataAccumulator`.
    """

    IDLE = "idle"
    IN_METADATA_BLOCK = "in_metadata_block"


class MetadataAccumulator:
    """
    Tracks the metadata block, that applies to the codes currently
    read, and the read position.

    The accumulator is in the ``IDLE`` state at the start and after a
    code line.
    The first description or comment line after that starts a new
    block, replacing the descriptions and comments of the previous one.
    When the next code line arrives, both change flags are set.
    They are reported for the following code only, via
    :meth:`next_record()`.

    Attributes
    ----------
    state : AccumulatorState
        The current state.
    descriptions, comments : list of str
        The lines of the current metadata block.
        PROTECTED: Do not modify from outside.
    description_changed, comment_changed : bool
        The change flags that will be reported for the next code.
    position : int
        The read position the next code will get.

    Examples
    --------

    >>> accumulator = MetadataAccumulator()
    >>> accumulator.process(LineType.DESCRIPTION, "seq1")
    >>> print(accumulator.state)
    AccumulatorState.IN_METADATA_BLOCK
    >>> accumulator.process(LineType.CODE, "AC")
    >>> first = accumulator.next_record("A")
    >>> second = accumulator.next_record("C")
    >>> print(first.position, first.description_changed, first.descriptions)
    0 True ('seq1',)
    >>> print(second.position, second.description_changed, second.descriptions)
    1 False ('seq1',)
    """

    def __init__(self):
        self.state = AccumulatorState.IDLE
        self.descriptions = []
        self.comments = []
        self.description_changed = False
        self.comment_changed = False
        self.position = 0
        # Snapshots are shared by all codes of the same block
        self._unchanged_metadata = Metadata()

    def process(self, line_type, content):
        """
        Update the state with a classified line.

        Parameters
        ----------
        line_type : LineType
            The role of the line.
        content : str
            The content of the line as returned by
            :func:`classify_line()`.
        """
        if line_type == LineType.DESCRIPTION or line_type == LineType.COMMENT:
            if self.state == AccumulatorState.IDLE:
                self._start_block()
            # Blank metadata text is not kept
            if len(content.strip()) != 0:
                if line_type == LineType.DESCRIPTION:
                    self.descriptions.append(content)
                else:
                    self.comments.append(content)
        elif line_type == LineType.CODE:
            if self.state == AccumulatorState.IN_METADATA_BLOCK:
                self._end_block()
        # Blank lines are invisible to the accumulator

    def next_record(self, symbol):
        """
        Create the record for the next code and advance the read
        position.

        The change flags are reported once and reset afterwards.

        Parameters
        ----------
        symbol : str
            The symbol of the code.

        Returns
        -------
        record : CodeRecord
            The record containing the code and a metadata snapshot.
        """
        if self.description_changed or self.comment_changed:
            metadata = Metadata(
                self._unchanged_metadata.descriptions,
                self._unchanged_metadata.comments,
                self.description_changed,
                self.comment_changed,
            )
            self.description_changed = False
            self.comment_changed = False
        else:
            metadata = self._unchanged_metadata
        record = CodeRecord(Code(symbol, self.position), metadata)
        self.position += 1
        return record

    def _start_block(self):
        self.state = AccumulatorState.IN_METADATA_BLOCK
        self.descriptions = []
        self.comments = []
        self.description_changed = False
        self.comment_changed = False

    def _end_block(self):
        self.state = AccumulatorState.IDLE
        self.description_changed = True
        self.comment_changed = True
        self._unchanged_metadata = Metadata(self.descriptions, self.comments)


class CodeSequence:
    """
    A lazy, single-pass iterator over the :class:`CodeRecord` objects
    of FASTA formatted lines.

    A line is only requested from the underlying source, when the codes
    of the previous line are consumed.
    The source is released, when the sequence is exhausted, when
    :meth:`close()` is called or when reading fails.
    It is recommended to use the sequence as context manager, if it
    might not be consumed completely.

    Parameters
    ----------
    lines : iterable of str
        The lines of FASTA text.
    release : callable, optional
        Called once, when the source is not needed anymore.

    Attributes
    ----------
    accumulator : MetadataAccumulator
        The state of this parse session.
    closed : bool
        Whether the source has been released.

    Examples
    --------

    >>> lines = [">seq1", "ACGT", "", ";note", "TT"]
    >>> for record in CodeSequence(lines):
    ...     print(record.symbol, record.position, record.description_changed)
    A 0 True
    C 1 False
    G 2 False
    T 3 False
    T 4 True
    T 5 False
    """

    def __init__(self, lines, release=None):
        self.accumulator = MetadataAccumulator()
        self._lines = iter(lines)
        self._release = release
        self._records = self._generate()
        self._closed = False

    @property
    def closed(self):
        return self._closed

    def __iter__(self):
        return self

    def __next__(self):
        if self._closed:
            raise StopIteration
        try:
            return next(self._records)
        except StopIteration:
            self.close()
            raise
        except BaseException:
            try:
                self.close()
            except SourceReadError as release_error:
                # The failure of reading is reported instead
                _logger.warning(
                    f"Failed to release FASTA source: {release_error.__cause__}"
                )
            raise

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        """
        Stop reading and release the underlying source.

        Calling this method more than once has no further effect.
        """
        if self._closed:
            return
        self._closed = True
        self._records.close()
        if self._release is not None:
            try:
                self._release()
            except _READ_ERRORS as e:
                raise SourceReadError("Failed to release FASTA source") from e
            _logger.debug(
                f"Released FASTA source after {self.accumulator.position} codes"
            )

    def _generate(self):
        accumulator = self.accumulator
        while True:
            try:
                line = next(self._lines)
            except StopIteration:
                break
            except _READ_ERRORS as e:
                raise SourceReadError("Failed to read FASTA source") from e
            line_type, content = classify_line(line)
            accumulator.process(line_type, content)
            if line_type == LineType.CODE:
                for symbol in content:
                    yield accumulator.next_record(symbol)
        if accumulator.state == AccumulatorState.IN_METADATA_BLOCK:
            _logger.debug(
                f"Dropped trailing metadata block with "
                f"{len(accumulator.descriptions)} description(s) and "
                f"{len(accumulator.comments)} comment(s), "
                f"as no code follows it"
            )


def parse_lines(lines):
    """
    Create a lazy sequence of :class:`CodeRecord` objects from lines of
    FASTA text.

    Parameters
    ----------
    lines : iterable of str
        The lines of FASTA text, with or without line break characters.

    Returns
    -------
    records : CodeSequence
        The lazy record sequence.

    Examples
    --------

    >>> text = ">Example header\\nACGT\\nACGT\\n"
    >>> print("".join(record.symbol for record in parse_lines(text.splitlines())))
    ACGTACGT
    """
    return CodeSequence(lines)


def read_codes(file, encoding=DEFAULT_ENCODING, gzip=None):
    """
    Create a lazy sequence of :class:`CodeRecord` objects from a FASTA
    file.

    Parameters
    ----------
    file : file-like object or str
        The file to be read.
        Alternatively a file path can be supplied.
    encoding : str, optional
        The text encoding for paths and binary file objects.
    gzip : bool, optional
        Whether the file is GZIP compressed.
        By default, this is deduced from a ``.gz`` suffix of a path.

    Returns
    -------
    records : CodeSequence
        The lazy record sequence.
        It owns the opened file, if a path was given.

    Raises
    ------
    SourceReadError
        If the file cannot be opened.
    """
    stream, release = open_source(file, encoding, gzip)
    return CodeSequence(stream, release)
