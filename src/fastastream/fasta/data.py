# This source code is part of the Fastastream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "fastastream.fasta"
__author__ = "The Fastastream contributors"
__all__ = ["FastaData", "read_raw_head", "RAW_HEAD_LENGTH"]

import numpy as np
from ..file import DEFAULT_ENCODING, File, SourceReadError, open_source
from ..record import Code, CodeRecord, Metadata
from .reader import _READ_ERRORS, read_codes
from .writer import DEFAULT_CHARS_PER_LINE, format_codes, write_codes


RAW_HEAD_LENGTH = 80_000_000


class FastaData(File):
    """
    This class represents the codes of a FASTA file together with the
    metadata lines that precede them.

    In contrast to a file class that keeps all lines in memory, the
    data is a lazy sequence of :class:`CodeRecord` objects:
    Reading a file does not parse anything until the records are
    requested, e.g. by :meth:`records()`, :meth:`as_string()` or
    :meth:`write()`.
    As a consequence the records can be consumed only once.

    Parameters
    ----------
    records : iterable of CodeRecord
        The records this object provides.

    Examples
    --------

    >>> import os.path
    >>> data = FastaData.from_raw("ACGT")
    >>> data.write(os.path.join(path_to_directory, "test.fasta"))
    >>> with FastaData.read(os.path.join(path_to_directory, "test.fasta")) as data:
    ...     print(data.as_string())
    ACGT
    >>> print(FastaData.from_raw(np.array(["A", "C", "G", "T"])).as_array())
    ['A' 'C' 'G' 'T']
    """

    def __init__(self, records):
        self._records = records
        self._consumed = False

    @classmethod
    def read(cls, file, encoding=DEFAULT_ENCODING, gzip=None):
        """
        Read a FASTA file lazily.

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
        data : FastaData
            The lazily parsed data.
            A file opened from a path is closed, when the records are
            consumed or :meth:`close()` is called.

        Raises
        ------
        SourceReadError
            If the file cannot be opened.
        """
        return cls(read_codes(file, encoding, gzip))

    @staticmethod
    def from_records(records):
        """
        Wrap existing :class:`CodeRecord` objects.

        Parameters
        ----------
        records : iterable of CodeRecord
            The records.

        Returns
        -------
        data : FastaData
            The data.
        """
        return FastaData(records)

    @staticmethod
    def from_codes(codes):
        """
        Create data from :class:`Code` objects without any metadata.

        Parameters
        ----------
        codes : iterable of Code
            The codes.
            Their positions are kept.

        Returns
        -------
        data : FastaData
            The data.
        """
        metadata = Metadata()
        return FastaData(CodeRecord(code, metadata) for code in codes)

    @staticmethod
    def from_raw(symbols):
        """
        Create data from raw symbols without any metadata.

        The read positions are assigned in the given order, starting
        at 0.

        Parameters
        ----------
        symbols : str or bytes or ndarray or iterable of str
            The symbols.
            A :class:`ndarray` may have either a *unicode* or a *bytes*
            dtype.

        Returns
        -------
        data : FastaData
            The data.
        """
        if isinstance(symbols, bytes):
            symbols = symbols.decode("ASCII")
        elif isinstance(symbols, np.ndarray):
            if symbols.dtype.kind == "S":
                symbols = symbols.astype("U1")
            symbols = symbols.ravel().tolist()
        return FastaData.from_codes(
            Code(symbol, position) for position, symbol in enumerate(symbols)
        )

    def records(self):
        """
        Get the records.

        Returns
        -------
        records : iterator of CodeRecord
            The records.

        Raises
        ------
        RuntimeError
            If the records were already consumed.
        """
        if self._consumed:
            raise RuntimeError("The records of FASTA data can only be consumed once")
        self._consumed = True
        return iter(self._records)

    def as_codes(self):
        """
        Get the codes without metadata.

        Returns
        -------
        codes : list of Code
            The codes.
        """
        return [record.code for record in self.records()]

    def as_string(self):
        """
        Get the symbols as string.

        Returns
        -------
        symbols : str
            The concatenated symbols.
        """
        return "".join([record.symbol for record in self.records()])

    def as_array(self, as_bytes=False):
        """
        Get the symbols as array.

        Parameters
        ----------
        as_bytes : bool, optional
            If true, the output array will contain `bytes`
            (dtype 'S1').
            Otherwise, the the output array will contain `str`
            (dtype 'U1').

        Returns
        -------
        symbols : ndarray, dtype='U1' or dtype='S1'
            The symbols.
        """
        symbols = np.array(
            [record.symbol for record in self.records()], dtype="U1"
        )
        if as_bytes:
            symbols = symbols.astype("S1")
        return symbols

    def format(self, chars_per_line=DEFAULT_CHARS_PER_LINE):
        """
        Get the FASTA text of this data.

        Parameters
        ----------
        chars_per_line : int, optional
            The number of codes after which a line break is inserted.

        Returns
        -------
        text : str
            The FASTA text.
        """
        return format_codes(self.records(), chars_per_line)

    def write(
        self, file, chars_per_line=DEFAULT_CHARS_PER_LINE, encoding=DEFAULT_ENCODING,
        gzip=None
    ):
        """
        Write this data as FASTA text into a file.

        Parameters
        ----------
        file : file-like object or str
            The file to be written to.
            Alternatively a file path can be supplied.
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
            If writing the file fails.
        """
        write_codes(file, self.records(), chars_per_line, encoding, gzip)

    def close(self):
        """
        Release the underlying source, if there is one.
        """
        close = getattr(self._records, "close", None)
        if close is not None:
            close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


def read_raw_head(
    file, max_chars=RAW_HEAD_LENGTH, encoding=DEFAULT_ENCODING, gzip=None
):
    """
    Read the beginning of a FASTA file as it is, without parsing.

    Parameters
    ----------
    file : file-like object or str
        The file to be read.
        Alternatively a file path can be supplied.
    max_chars : int, optional
        The maximum number of characters to read.
    encoding : str, optional
        The text encoding for paths and binary file objects.
    gzip : bool, optional
        Whether the file is GZIP compressed.
        By default, this is deduced from a ``.gz`` suffix of a path.

    Returns
    -------
    text : str
        The first `max_chars` characters of the file.

    Raises
    ------
    SourceReadError
        If opening or reading the file fails.
    """
    stream, release = open_source(file, encoding, gzip)
    try:
        return stream.read(max_chars)
    except _READ_ERRORS as e:
        raise SourceReadError("Failed to read FASTA source") from e
    finally:
        try:
            release()
        except _READ_ERRORS as e:
            raise SourceReadError("Failed to release FASTA source") from e
