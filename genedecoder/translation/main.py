# project imports
from ..utils.io import read_records, write_protein_fasta
from ..utils.time import elapsed_time
from .proteinprocessor import ProteinProcessor as PProcessor, Translation
# Other imports
import os
import time
import click
from functools import partial
import joblib.parallel as parallel


green_fg = partial(click.style, fg='green')
yellow_fg = partial(click.style, fg='yellow')
magenta_fg = partial(click.style, fg='magenta')
cyan_fg = partial(click.style, fg='cyan')
red_fg = partial(click.style, fg='red')


def translate_records(records, mode=Translation.ONE_LETTER, reverse=False):
    """Translate (id, description, sequence) records; the first bad record aborts the whole run."""
    processor = PProcessor()
    proteins = []
    for record_id, description, sequence in records:
        if reverse:
            sequence = processor.reverse_complement(sequence)
        proteins.append((record_id, description, processor.translate_sequence(sequence, mode)))
    return proteins


def translate_file(filepath, output_folder, mode=Translation.ONE_LETTER, reverse=False, verbose=False):
    filename = os.path.basename(filepath)
    click.echo(green_fg('>>> Translating records in file: %s' % filename))
    start = time.time()
    proteins = translate_records(read_records(filepath), mode, reverse)
    output_file = os.path.join(output_folder, os.path.splitext(filename)[0] + '.faa')
    count = write_protein_fasta(proteins, output_file)
    finish = time.time()
    if verbose:
        hr, min, sec = elapsed_time(start, finish)
        click.echo(cyan_fg("Finished translating %s in time %d hr, %d min, %d sec" % (filename, hr, min, sec)))
    click.echo(magenta_fg('>>> Wrote %d proteins to %s' % (count, os.path.basename(output_file))))
    return output_file


def translate_files(file_list, output_folder, mode=Translation.ONE_LETTER, reverse=False, threads=1,
                    verbose=False):
    click.echo(cyan_fg('>>> Starting translation of %d files on %s cores.' % (len(file_list), threads)))
    return parallel.Parallel(n_jobs=threads)(parallel.delayed(translate_file)(f, output_folder, mode, reverse,
                                                                              verbose) for f in file_list)
