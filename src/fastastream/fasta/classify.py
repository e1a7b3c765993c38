# This source code is part of the Fastastream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "fastastream.fasta"
__author__ = "The Fastastream contributors"
__all__ = ["LineType", "classify_line", "DESCRIPTION_PREFIX", "COMMENT_PREFIX"]

import enum


DESCRIPTION_PREFIX = ">"
COMMENT_PREFIX = ";"


class LineType(enum.IntEnum):
    """
    An enum for the roles a line can play in a FASTA file.
    """

    DESCRIPTION = 0
    COMMENT = 1
    BLANK = 2
    CODE = 3


def classify_line(line):
    """
    Determine the role of a line in a FASTA file.

    The line is trimmed before it is classified.
    A line starting with ``>`` is a description, a line starting with
    ``;`` is a comment, an empty line is blank and every other line
    contains sequence codes.

    Parameters
    ----------
    line : str
        The line to be classified.

    Returns
    -------
    line_type : LineType
        The role of the line.
    content : str
        For descriptions and comments the text after the prefix,
        for code lines the codes without any whitespace and an empty
        string for blank lines.

    Examples
    --------

    >>> print(classify_line(">seq1 example\\n"))
    (<LineType.DESCRIPTION: 0>, 'seq1 example')
    >>> print(classify_line("  ACGT ACGT  "))
    (<LineType.CODE: 3>, 'ACGTACGT')
    >>> print(classify_line("\\r\\n"))
    (<LineType.BLANK: 2>, '')
    """
    line = line.strip()
    if line.startswith(DESCRIPTION_PREFIX):
        return LineType.DESCRIPTION, line[len(DESCRIPTION_PREFIX) :]
    elif line.startswith(COMMENT_PREFIX):
        return LineType.COMMENT, line[len(COMMENT_PREFIX) :]
    elif len(line) == 0:
        return LineType.BLANK, ""
    else:
        # Each non-whitespace character is a code
        return LineType.CODE, "".join(line.split())
