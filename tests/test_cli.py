"""Tests for the genedecoder console script."""
import os

from click.testing import CliRunner
from Bio import SeqIO

from genedecoder import cli
from genedecoder.translation import reverse_complement, translate_sequence

from .helpers import PLASMID_SEQUENCE, write_fasta


def run(*args, **kwargs):
    return CliRunner().invoke(cli.main, list(args), **kwargs)


class TestView:

    def test_missing_file(self, tmp_path):
        result = run('view', str(tmp_path / 'nope.fasta'))
        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_gene_from_option(self, plasmid_fasta):
        result = run('view', plasmid_fasta, '--gene', '1')
        assert result.exit_code == 0, result.output
        assert "Sequence ID: NC_005816.1" in result.output
        assert "9) YP_RS22250" in result.output
        assert "Length: 1023" in result.output
        assert "Length: 341" in result.output
        gene = PLASMID_SEQUENCE[86:1109]
        assert "001 " + gene[:72] in result.output
        assert "001 " + translate_sequence(gene)[:72] in result.output

    def test_gene_from_prompt(self, plasmid_fasta):
        result = run('view', plasmid_fasta, input="3\n")
        assert result.exit_code == 0, result.output
        assert "Which one would you like to view?" in result.output
        assert "Length: 195" in result.output
        assert "Length: 65" in result.output

    def test_reverse_strand_gene(self, plasmid_fasta):
        result = run('view', plasmid_fasta, '--gene', '5')
        assert result.exit_code == 0, result.output
        gene = reverse_complement(PLASMID_SEQUENCE[4814:5888])
        assert "001 " + gene[:72] in result.output
        assert "Length: 358" in result.output

    def test_three_letter_numbering(self, plasmid_fasta):
        result = run('view', plasmid_fasta, '--gene', '1')
        lines = result.output.splitlines()
        start = lines.index("Three-letter code:")
        assert [line[:4] for line in lines[start + 1:start + 6]] == ["001 ", "073 ", "145 ", "217 ", "289 "]
        assert len(lines[start + 1]) == 4 + 72 * 3
        assert lines[start + 6] == "Length: 341"

    def test_unknown_gene(self, plasmid_fasta):
        result = run('view', plasmid_fasta, '--gene', '12')
        assert result.exit_code == 1
        assert ">>> ERROR: No gene 12" in result.output

    def test_explicit_range(self, small_fasta):
        result = run('view', small_fasta, '--start', '0', '--end', '6')
        assert result.exit_code == 0, result.output
        assert "001 MF\n" in result.output
        assert "001 MetPhe\n" in result.output
        assert "001 MG\n" in result.output

    def test_explicit_range_reverse(self, tmp_path):
        fasta = write_fasta(tmp_path / "r.fa", [("r", "reverse", "TTACAT")])
        result = run('view', fasta, '--start', '0', '--end', '6', '--reverse')
        assert result.exit_code == 0, result.output
        assert "001 ATGTAA\n" in result.output
        assert "001 Met***\n" in result.output

    def test_range_outside_record(self, small_fasta):
        result = run('view', small_fasta, '--start', '0', '--end', '30')
        assert result.exit_code == 1
        assert "outside the sequence" in result.output

    def test_misaligned_range(self, small_fasta):
        result = run('view', small_fasta, '--start', '0', '--end', '4')
        assert result.exit_code == 1
        assert "not a multiple of 3" in result.output

    def test_start_without_end(self, small_fasta):
        result = run('view', small_fasta, '--start', '0')
        assert result.exit_code == 2

    def test_gene_with_range_is_rejected(self, plasmid_fasta):
        result = run('view', plasmid_fasta, '--gene', '1', '--start', '0', '--end', '6')
        assert result.exit_code == 2
        assert "--gene cannot be combined" in result.output
        assert "DNA sequence" not in result.output

    def test_uncatalogued_record_is_skipped(self, small_fasta):
        result = run('view', small_fasta)
        assert result.exit_code == 0, result.output
        assert "No genes known for seq1" in result.output
        assert "DNA sequence" not in result.output

    def test_invalid_base_is_fatal(self, tmp_path):
        fasta = write_fasta(tmp_path / "n.fa", [("n", "ambiguous", "ATGNNN")])
        result = run('view', fasta, '--start', '0', '--end', '6')
        assert result.exit_code == 1
        assert "Invalid codon 'NNN'" in result.output


class TestTranslate:

    def test_translate_files(self, tmp_path, small_fasta):
        out = str(tmp_path / 'proteins')
        result = run('translate', small_fasta, '--out', out, '--threads', '1', '--three-letter')
        assert result.exit_code == 0, result.output
        records = list(SeqIO.parse(os.path.join(out, 'small.faa'), 'fasta'))
        assert [str(r.seq) for r in records] == ["MetPhe***", "MetGly"]

    def test_translate_folder(self, tmp_path):
        folder = tmp_path / 'genomes'
        folder.mkdir()
        write_fasta(folder / "a.fasta", [("a", "first", "ATGAAA")])
        write_fasta(folder / "b.fa", [("b", "second", "TGG")])
        (folder / "readme.txt").write_text("not a fasta file")
        out = str(tmp_path / 'proteins')
        result = run('translate', str(folder), '--out', out, '--threads', '1')
        assert result.exit_code == 0, result.output
        assert sorted(os.listdir(out)) == ['a.faa', 'b.faa']
        assert "Successfully translated 2 files" in result.output

    def test_empty_folder(self, tmp_path):
        result = run('translate', str(tmp_path), '--out', str(tmp_path / 'proteins'))
        assert result.exit_code == 1
        assert "No FASTA files found" in result.output

    def test_translate_failure(self, tmp_path):
        fasta = write_fasta(tmp_path / "bad.fa", [("bad", "misaligned", "ATGA")])
        result = run('translate', fasta, '--out', str(tmp_path / 'proteins'), '--threads', '1')
        assert result.exit_code == 1
        assert "not a multiple of 3" in result.output

    def test_translate_failure_in_parallel_workers(self, tmp_path):
        good = write_fasta(tmp_path / "good.fa", [("good", "aligned", "ATGAAA")])
        bad = write_fasta(tmp_path / "bad.fa", [("bad", "misaligned", "ATGA")])
        result = run('translate', good, bad, '--out', str(tmp_path / 'proteins'), '--threads', '2')
        assert result.exit_code == 1
        assert ">>> ERROR: Sequence length (4) is not a multiple of 3" in result.output


class TestFetch:

    def test_fetch_uses_download_record(self, tmp_path, monkeypatch):
        calls = []

        def fake_download(accession, output_dir):
            calls.append((accession, output_dir))
            return os.path.join(output_dir, accession + '.fasta')

        monkeypatch.setattr(cli, 'download_record', fake_download)
        result = run('fetch', '--dir', str(tmp_path))
        assert result.exit_code == 0, result.output
        assert calls == [('NC_005816.1', str(tmp_path))]
        assert "Record saved to" in result.output


def test_verbose_reports_record_length(small_fasta):
    result = run('--verbose', 'view', small_fasta, '--start', '0', '--end', '3')
    assert result.exit_code == 0, result.output
    assert "Record length: 9" in result.output
