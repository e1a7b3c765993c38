# This source code is part of the Fastastream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
The value types shared by the reading and the writing side.
"""

__name__ = "fastastream"
__author__ = "The Fastastream contributors"
__all__ = ["Code", "Metadata", "CodeRecord"]

from dataclasses import dataclass


@dataclass(frozen=True)
class Code:
    """
    A single symbol of a sequence together with its read position.

    Parameters
    ----------
    symbol : str
        The single character that was read.
    position : int
        The 0-based position of the symbol in the stream of codes.
        Metadata and blank lines do not count.

    Examples
    --------

    >>> code = Code("A", 3)
    >>> print(code.replace_symbol("G"))
    Code(symbol='G', position=3)
    """

    symbol: ...
    position: ...

    def __post_init__(self):
        if not isinstance(self.symbol, str):
            raise TypeError(
                f"Symbol must be a string, not '{type(self.symbol).__name__}'"
            )
        if len(self.symbol) != 1:
            raise ValueError(
                f"Symbol must be a single character, got '{self.symbol}'"
            )

    def replace_symbol(self, symbol):
        """
        Create a copy of this code with another symbol at the same
        position.

        Parameters
        ----------
        symbol : str
            The new symbol.

        Returns
        -------
        code : Code
            The new code.
        """
        return Code(symbol, self.position)


@dataclass(frozen=True)
class Metadata:
    """
    The description and comment lines that apply to a code.

    Both lists represent the most recent contiguous block of metadata
    lines that appeared in front of the code.
    The change flags are only true for the first code following such a
    block.

    Parameters
    ----------
    descriptions : iterable of str, optional
        The description lines without the leading ``>``.
    comments : iterable of str, optional
        The comment lines without the leading ``;``.
    description_changed, comment_changed : bool, optional
        Whether the descriptions or comments appear for the first time
        at this code.
    """

    descriptions: ... = ()
    comments: ... = ()
    description_changed: ... = False
    comment_changed: ... = False

    def __post_init__(self):
        # Freeze lists given by the caller
        object.__setattr__(self, "descriptions", tuple(self.descriptions))
        object.__setattr__(self, "comments", tuple(self.comments))

    @property
    def changed(self):
        return self.description_changed or self.comment_changed


@dataclass(frozen=True)
class CodeRecord:
    """
    A :class:`Code` combined with the :class:`Metadata` that was
    current, when the code was read.

    This is the unit produced when reading and consumed when writing
    FASTA data.

    Parameters
    ----------
    code : Code
        The code.
    metadata : Metadata, optional
        The metadata snapshot.
        By default, empty metadata without changes is used.

    Examples
    --------

    >>> record = CodeRecord(Code("A", 0), Metadata(["seq1"], [], True, True))
    >>> print(record.symbol, record.position, record.descriptions)
    A 0 ('seq1',)
    >>> print(record.replace_symbol("T").symbol)
    T
    """

    code: ...
    metadata: ... = Metadata()

    @property
    def symbol(self):
        return self.code.symbol

    @property
    def position(self):
        return self.code.position

    @property
    def descriptions(self):
        return self.metadata.descriptions

    @property
    def comments(self):
        return self.metadata.comments

    @property
    def description_changed(self):
        return self.metadata.description_changed

    @property
    def comment_changed(self):
        return self.metadata.comment_changed

    def replace_symbol(self, symbol):
        """
        Create a copy of this record with another symbol.
        Position and metadata are kept.

        Parameters
        ----------
        symbol : str
            The new symbol.

        Returns
        -------
        record : CodeRecord
            The new record.
        """
        return CodeRecord(self.code.replace_symbol(symbol), self.metadata)
