# This source code is part of the Fastastream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *Fastastream*.
It provides the record types shared by reading and writing, the
file abstractions and the errors raised at the I/O boundary.
The FASTA reading and writing itself is found in the
:mod:`fastastream.fasta` subpackage.
"""

__version__ = "0.1.0"
__name__ = "fastastream"
__author__ = "The Fastastream contributors"

from .file import *
from .record import *
