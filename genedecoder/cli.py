# -*- coding: utf-8 -*-

"""Console script for genedecoder."""
# project imports
from .genes import get_gene, get_genes
from .translation import ProteinProcessor, Translation, TranslationError
from .translation.main import translate_files
from .utils.download import download_record, DEFAULT_ACCESSION
from .utils.formatting import SeqType, print_sequence
from .utils.io import check_and_create_folders, get_file_list, read_records
# Library imports
import os
import sys
import click
from functools import partial
import joblib.parallel as parallel

green_fg = partial(click.style, fg='green')
yellow_fg = partial(click.style, fg='yellow')
magenta_fg = partial(click.style, fg='magenta')
cyan_fg = partial(click.style, fg='cyan')
red_fg = partial(click.style, fg='red')
decoder_option = partial(click.option, show_default=True)

DEFAULT_FASTA = "sequence.fasta"


class Config(object):
    def __init__(self):
        self.verbose = False
        self.debug = False


pass_config = click.make_pass_decorator(Config, ensure=True)


def fail(message):
    click.echo(red_fg(">>> ERROR: %s" % message))
    sys.exit(1)


def select_sequence(processor, record_id, sequence, gene_number, start, end, reverse):
    """Pick the region of a record to decode, or None when there is nothing to select."""
    if start is not None or end is not None:
        if gene_number is not None:
            raise click.UsageError("--gene cannot be combined with --start/--end")
        if start is None or end is None:
            raise click.UsageError("--start and --end must be given together")
        region = processor.select_region(sequence, start, end)
        return processor.reverse_complement(region) if reverse else region

    genes = get_genes(record_id)
    if not genes:
        return None
    click.echo(cyan_fg("\nFrom 'https://www.ncbi.nlm.nih.gov/nuccore/%s'," % record_id.split('.')[0]))
    click.echo(cyan_fg("we know that this piece of DNA encodes %d genes.\n" % len(genes)))
    for gene in genes:
        click.echo("%d) %s: %s" % (gene.number, gene.locus_tag, gene.description))
    if gene_number is None:
        gene_number = click.prompt(magenta_fg("\nWhich one would you like to view?"), type=int)
    gene = get_gene(record_id, gene_number)
    region = processor.select_region(sequence, gene.start, gene.end)
    # genes on the reverse strand are read from their reverse complement
    if gene.reverse or reverse:
        region = processor.reverse_complement(region)
    return region


def show_translation(processor, sequence):
    click.echo(green_fg("\nDNA sequence:"))
    print_sequence(sequence, SeqType.DNA)
    click.echo("Length: %d\n" % len(sequence))
    peptide1 = processor.translate_sequence(sequence, Translation.ONE_LETTER)
    peptide3 = processor.translate_sequence(sequence, Translation.THREE_LETTER)
    click.echo(green_fg("One-letter code:"))
    print_sequence(peptide1, SeqType.PROTEIN1)
    click.echo(green_fg("\nThree-letter code:"))
    print_sequence(peptide3, SeqType.PROTEIN3)
    click.echo("Length: %d\n" % len(peptide1))


@click.group()
@decoder_option("--verbose", is_flag=True, default=False)
@decoder_option("--debug", is_flag=True, default=False)
@pass_config
def main(config, verbose, debug):
    """Console script for genedecoder."""
    config.verbose = verbose  # pragma: no cover
    config.debug = debug  # pragma: no cover


@main.command()
@click.argument("filename", required=False, default=DEFAULT_FASTA)
@decoder_option("--gene", type=int, default=None, help="number of the catalogued gene to view. "
                                                      "If omitted you will be asked.")
@decoder_option("--start", type=int, default=None, help="0-based start of the region to view")
@decoder_option("--end", type=int, default=None, help="0-based, exclusive end of the region to view")
@decoder_option("--reverse", is_flag=True, help="view the reverse complement of the region")
@pass_config
def view(config, *args, **kwargs):
    """Print a gene and its protein from a FASTA file."""
    filename = kwargs['filename']
    if not os.path.exists(filename):
        fail("File '%s' does not exist." % filename)
    click.echo(magenta_fg("Reading FASTA records from file '%s'..." % filename))
    processor = ProteinProcessor()
    for record_id, description, sequence in read_records(filename):
        click.echo("\nSequence ID: %s" % record_id)
        click.echo("Sequence description:\n%s" % description)
        if config.verbose:
            click.echo(yellow_fg("Record length: %d" % len(sequence)))
        try:
            region = select_sequence(processor, record_id, sequence, kwargs['gene'], kwargs['start'],
                                     kwargs['end'], kwargs['reverse'])
            if region is None:
                click.echo(yellow_fg(">>> No genes known for %s, use --start/--end to pick a region." % record_id))
                continue
            show_translation(processor, region)
        except TranslationError as err:
            if config.debug:
                raise
            fail(err)


@main.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True))
@decoder_option("--out", required=True, help="folder the translated .faa files are written to")
@decoder_option("--three-letter", is_flag=True, help="write three-letter amino acid codes")
@decoder_option("--reverse", is_flag=True, help="translate the reverse complement of every record")
@decoder_option("--threads", type=int, required=False, help="Number of threads to use for processing the files. "
                                                            "Defaults to the number of processors.")
@pass_config
def translate(config, *args, **kwargs):
    """Translate every record of the given FASTA files."""
    click.echo(green_fg("\n{}  Translate  {}\n".format(">" * 10, "<" * 10)))
    threads = kwargs['threads'] if kwargs['threads'] else parallel.cpu_count()
    mode = Translation.THREE_LETTER if kwargs['three_letter'] else Translation.ONE_LETTER
    file_list = []
    for path in kwargs['files']:
        if os.path.isdir(path):
            file_list.extend(os.path.join(path, f) for f in get_file_list(path))
        else:
            file_list.append(path)
    if not len(file_list):
        fail("No FASTA files found in %s." % ", ".join(kwargs['files']))
    output_folder = os.path.abspath(kwargs['out'])
    check_and_create_folders(os.path.dirname(output_folder), [os.path.basename(output_folder)])
    try:
        translate_files(file_list, output_folder, mode, kwargs['reverse'], threads, config.verbose)
    except TranslationError as err:
        if config.debug:
            raise
        fail(err)
    click.echo(green_fg(">>> Successfully translated %d files." % len(file_list)))


@main.command()
@decoder_option("--accession", default=DEFAULT_ACCESSION, help="NCBI nucleotide accession to download")
@decoder_option("--dir", default=".", help="folder the FASTA file is saved to")
@pass_config
def fetch(config, *args, **kwargs):
    """Download a nucleotide record from NCBI as FASTA."""
    path = download_record(kwargs['accession'], kwargs['dir'])
    click.echo(green_fg(">>> Record saved to %s" % path))


if __name__ == "__main__":
    sys.exit(main())  # pragma: no cover
