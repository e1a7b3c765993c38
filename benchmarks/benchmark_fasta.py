import io
import numpy as np
import pytest
import fastastream.fasta as fasta


N_CODES = 100_000


@pytest.fixture(scope="module")
def fasta_text():
    np.random.seed(0)
    code = np.random.randint(4, size=N_CODES)
    symbols = "".join(np.array(list("ACGT"))[code])
    return fasta.format_codes(
        fasta.parse_lines([">random sequence", ";benchmark input", symbols])
    )


@pytest.fixture(scope="module")
def records(fasta_text):
    return list(fasta.parse_lines(fasta_text.splitlines()))


@pytest.mark.benchmark
def benchmark_read(fasta_text):
    for _ in fasta.read_codes(io.StringIO(fasta_text)):
        pass


@pytest.mark.benchmark
def benchmark_write(records):
    fasta.write_codes(io.StringIO(), records)


@pytest.mark.benchmark
def benchmark_as_array(fasta_text):
    fasta.FastaData.read(io.StringIO(fasta_text)).as_array()
