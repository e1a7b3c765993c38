# This source code is part of the Fastastream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import re
from os.path import join, dirname, realpath


def data_dir(subdir):
    return join(dirname(realpath(__file__)), subdir, "data")


def strip_line_breaks(text):
    """
    Remove all line breaks, so that FASTA texts can be compared
    independent of their line wrapping.
    """
    return re.sub(r"\r*\n+", "", text)
