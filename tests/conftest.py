import pytest

from .helpers import PLASMID_SEQUENCE, write_fasta


@pytest.fixture
def plasmid_fasta(tmp_path):
    return write_fasta(tmp_path / "sequence.fasta",
                       [("NC_005816.1", "Yersinia pestis biovar Microtus str. 91001 plasmid pPCP1",
                         PLASMID_SEQUENCE)])


@pytest.fixture
def small_fasta(tmp_path):
    return write_fasta(tmp_path / "small.fa",
                       [("seq1", "first test record", "ATGTTTTAA"),
                        ("seq2", "second test record", "atgggc")])
