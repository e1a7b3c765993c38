# This source code is part of the Fastastream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import numpy as np
import pytest


@pytest.fixture
def random_fasta_text():
    """
    FASTA text with multiple metadata blocks and randomly wrapped
    sequence lines.
    """
    np.random.seed(0)
    lines = []
    for i in range(5):
        lines.append(f">seq_{i} random sequence")
        if i % 2 == 0:
            lines.append(f";comment of seq_{i}")
            lines.append(";second comment")
        n_lines = np.random.randint(1, 5)
        for _ in range(n_lines):
            line_length = np.random.randint(1, 100)
            code = np.random.randint(4, size=line_length)
            lines.append("".join(np.array(list("ACGT"))[code]))
    return "\n".join(lines) + "\n"
