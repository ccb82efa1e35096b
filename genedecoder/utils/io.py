# -*- coding: utf-8 -*-
import os
import sys
import click
from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord
from functools import partial

green_fg = partial(click.style, fg='green')
yellow_fg = partial(click.style, fg='yellow')
magenta_fg = partial(click.style, fg='magenta')
cyan_fg = partial(click.style, fg='cyan')
red_fg = partial(click.style, fg='red')

FASTA_SUFFIXES = ('.fasta', '.fa', '.fna', '.ffn')


def check_and_create_folders(directory, folder_list, interactive=False):
    for folder in folder_list:
        if os.path.exists(os.path.join(directory, folder)):
            click.echo(red_fg(">>> WARNING: Folder (%s) already exists in path (%s). "
                              "Existing files will be overwritten!" % (folder.upper(), directory)))
            if interactive:
                if not click.confirm(magenta_fg('Do you want to continue? If you do, '
                                                'the existing files will be overwritten')):
                    click.echo(red_fg("ABORTING..."))
                    sys.exit(1)
        else:
            os.makedirs(os.path.join(directory, folder))


def get_file_list(directory, suffixes=FASTA_SUFFIXES):
    return_list = []
    for fi in sorted(os.listdir(directory)):
        if os.path.splitext(fi)[1].lower() in suffixes:
            return_list.append(fi)
    return return_list


def read_records(filename):
    """Yield (id, description, sequence) for every FASTA record in a file.

    Sequences are upper-cased here; anything else that is not A, C, G or T
    is left for the translator to reject.
    """
    for record in SeqIO.parse(filename, 'fasta'):
        yield record.id, record.description, str(record.seq).upper()


def write_protein_fasta(proteins, filename):
    """Write (id, description, protein) tuples to a FASTA file, returning the record count."""
    records = [SeqRecord(Seq(protein), id=record_id, description=description)
               for record_id, description, protein in proteins]
    with open(filename, 'w') as output_handle:
        return SeqIO.write(records, output_handle, 'fasta')
