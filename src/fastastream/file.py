# This source code is part of the Fastastream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "fastastream"
__author__ = "The Fastastream contributors"
__all__ = [
    "File",
    "SourceReadError",
    "SinkWriteError",
    "DEFAULT_ENCODING",
    "GZIP_SUFFIX",
    "open_source",
    "open_sink",
    "is_text",
    "is_binary",
    "is_open_compatible",
]

import abc
import gzip as gz
import io
import logging
import os
from os import PathLike


DEFAULT_ENCODING = "utf-8"
GZIP_SUFFIX = ".gz"

_logger = logging.getLogger(__name__)


class File(metaclass=abc.ABCMeta):
    """
    Base class for all file classes.
    The class method :func:`read()` reads a file from disk
    (or a file-like object from other sources).
    In order to write the instance content into a file the
    :func:`write()` method is used.
    """

    @classmethod
    @abc.abstractmethod
    def read(cls, file):
        """
        Parse a file (or file-like object).

        Parameters
        ----------
        file : file-like object or str
            The file to be read.
            Alternatively a file path can be supplied.

        Returns
        -------
        file : File
            An instance from the respective :class:`File` subclass
            representing the parsed file.
        """
        pass

    @abc.abstractmethod
    def write(self, file):
        """
        Write the contents of this :class:`File` object into a file.

        Parameters
        ----------
        file : file-like object or str
            The file to be written to.
            Alternatively a file path can be supplied.
        """
        pass


class SourceReadError(OSError):
    """
    Indicates that the source of a FASTA parse could not be opened or
    that reading the next line from it failed.

    The original exception is available as ``__cause__``.
    """

    pass


class SinkWriteError(OSError):
    """
    Indicates that the sink of a FASTA write could not be opened,
    written to or released.

    The original exception is available as ``__cause__``.
    """

    pass


def open_source(file, encoding=DEFAULT_ENCODING, gzip=None):
    """
    Open a file (or file-like object) for line based text reading.

    Parameters
    ----------
    file : file-like object or str or PathLike
        The file to be read.
        Alternatively a file path can be supplied.
    encoding : str, optional
        The text encoding used to decode paths and binary file objects.
        Ignored for file objects opened in text mode.
    gzip : bool, optional
        Whether the content is GZIP compressed.
        By default, paths ending with ``.gz`` are decompressed and file
        objects are read as they are.

    Returns
    -------
    stream : file-like object
        A text stream, that can be iterated line by line.
    release : callable
        Releases the stream without closing file objects that are owned
        by the caller.

    Raises
    ------
    SourceReadError
        If the file cannot be opened.
    """
    if is_open_compatible(file):
        use_gzip = _has_gzip_suffix(file) if gzip is None else gzip
        try:
            if use_gzip:
                stream = gz.open(file, "rt", encoding=encoding)
            else:
                stream = open(file, "r", encoding=encoding)
        except OSError as e:
            raise SourceReadError(f"Failed to open FASTA source '{file}'") from e
        _logger.debug(f"Opened FASTA source '{file}'")
        return stream, stream.close
    elif is_text(file):
        if gzip:
            raise TypeError(
                "A GZIP compressed source must be opened in 'binary' mode"
            )
        return file, _no_release
    elif is_binary(file):
        buffer = gz.GzipFile(fileobj=file, mode="rb") if gzip else file
        stream = io.TextIOWrapper(buffer, encoding=encoding)
        return stream, _detaching_release(stream, buffer is not file)
    else:
        raise TypeError(f"Cannot read from object of type '{type(file).__name__}'")


def open_sink(file, encoding=DEFAULT_ENCODING, gzip=None):
    """
    Open a file (or file-like object) for text writing.

    Missing parent directories of a file path are created.

    Parameters
    ----------
    file : file-like object or str or PathLike
        The file to be written to.
        Alternatively a file path can be supplied.
    encoding : str, optional
        The text encoding used for paths and binary file objects.
        Ignored for file objects opened in text mode.
    gzip : bool, optional
        Whether the content is GZIP compressed.
        By default, paths ending with ``.gz`` are compressed and file
        objects are written as they are.

    Returns
    -------
    stream : file-like object
        A text stream.
    release : callable
        Closes streams opened by this function and flushes file objects
        owned by the caller.

    Raises
    ------
    SinkWriteError
        If the file cannot be opened.
    """
    if is_open_compatible(file):
        use_gzip = _has_gzip_suffix(file) if gzip is None else gzip
        try:
            parent = os.path.dirname(os.fsdecode(file))
            if parent:
                os.makedirs(parent, exist_ok=True)
            if use_gzip:
                stream = gz.open(file, "wt", encoding=encoding)
            else:
                stream = open(file, "w", encoding=encoding)
        except OSError as e:
            raise SinkWriteError(f"Failed to open FASTA sink '{file}'") from e
        _logger.debug(f"Opened FASTA sink '{file}'")
        return stream, stream.close
    elif is_text(file):
        if gzip:
            raise TypeError(
                "A GZIP compressed sink must be opened in 'binary' mode"
            )
        return file, file.flush
    elif is_binary(file):
        buffer = gz.GzipFile(fileobj=file, mode="wb") if gzip else file
        stream = io.TextIOWrapper(buffer, encoding=encoding)
        return stream, _detaching_release(stream, buffer is not file)
    else:
        raise TypeError(f"Cannot write to object of type '{type(file).__name__}'")


def _no_release():
    pass


def _detaching_release(wrapper, close_buffer):
    """
    Create a release function for a text wrapper around a caller-owned
    binary file object.
    The wrapper is detached, so that the caller's object stays open.
    An intermediate GZIP layer is closed to write its trailer.
    """
    released = False

    def release():
        nonlocal released
        if released:
            return
        released = True
        wrapper.flush()
        buffer = wrapper.detach()
        if close_buffer:
            buffer.close()
    return release


def _has_gzip_suffix(file):
    return os.fsdecode(file).endswith(GZIP_SUFFIX)


def is_binary(file):
    if isinstance(file, io.BufferedIOBase):
        return True
    # for file wrappers, e.g. 'TemporaryFile'
    return hasattr(file, "file") and isinstance(file.file, io.BufferedIOBase)


def is_text(file):
    if isinstance(file, io.TextIOBase):
        return True
    # for file wrappers, e.g. 'TemporaryFile'
    return hasattr(file, "file") and isinstance(file.file, io.TextIOBase)


def is_open_compatible(file):
    return isinstance(file, (str, bytes, PathLike))
