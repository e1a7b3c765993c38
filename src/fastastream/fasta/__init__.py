# This source code is part of the Fastastream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This subpackage is used for streaming sequence codes from and to the
popular FASTA format.

Reading converts FASTA text line by line into a lazy
:class:`CodeSequence` of :class:`CodeRecord` objects:
Each code character gets its read position and a snapshot of the
description (``>``) and comment (``;``) lines in front of it.
Writing converts such records back into FASTA text, wrapped after a
fixed number of characters per line.

The :class:`FastaData` class bundles a record sequence with
conversions into strings and arrays.
"""

__name__ = "fastastream.fasta"
__author__ = "The Fastastream contributors"

from .classify import *
from .reader import *
from .writer import *
from .data import *
