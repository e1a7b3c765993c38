# This source code is part of the Fastastream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
from fastastream.fasta import LineType, classify_line


@pytest.mark.parametrize("line, line_type, content", [
    (">seq1", LineType.DESCRIPTION, "seq1"),
    (">seq1 some annotation\n", LineType.DESCRIPTION, "seq1 some annotation"),
    ("  > spaced\r\n", LineType.DESCRIPTION, " spaced"),
    (">", LineType.DESCRIPTION, ""),
    (">>nested", LineType.DESCRIPTION, ">nested"),
    (";comment", LineType.COMMENT, "comment"),
    ("; a sample sequence", LineType.COMMENT, " a sample sequence"),
    (";>not a description", LineType.COMMENT, ">not a description"),
    ("", LineType.BLANK, ""),
    ("   \t  ", LineType.BLANK, ""),
    ("\n", LineType.BLANK, ""),
    ("ACGT", LineType.CODE, "ACGT"),
    ("  ACGT\n", LineType.CODE, "ACGT"),
    ("ACGT ACGT", LineType.CODE, "ACGTACGT"),
    ("acgu-*xN", LineType.CODE, "acgu-*xN"),
    ("A>C;G", LineType.CODE, "A>C;G"),
])
def test_classify_line(line, line_type, content):
    assert classify_line(line) == (line_type, content)
