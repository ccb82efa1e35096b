import os
import math
import click
import requests
from tqdm import tqdm
from functools import partial

green_fg = partial(click.style, fg='green')
yellow_fg = partial(click.style, fg='yellow')
magenta_fg = partial(click.style, fg='magenta')
cyan_fg = partial(click.style, fg='cyan')
red_fg = partial(click.style, fg='red')

EFETCH_URL = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/efetch.fcgi"
DEFAULT_ACCESSION = "NC_005816.1"


def download_url(url, file_path, params=None):
    # Streaming, so we can iterate over the response.
    r = requests.get(url, params=params, stream=True, timeout=60)
    r.raise_for_status()
    # Total size in bytes.
    total_size = int(r.headers.get('content-length', 0))
    block_size = 1024
    wrote = 0
    click.echo(green_fg(">>> Downloading %s" % os.path.basename(file_path)))
    with open(file_path, 'wb') as f:
        for data in tqdm(r.iter_content(block_size), total=math.ceil(total_size / block_size), unit='KB',
                         unit_scale=True):
            wrote = wrote + len(data)
            f.write(data)
    if total_size != 0 and wrote != total_size:
        click.echo(red_fg(">>> ERROR, downloaded %d of %d bytes for %s" % (wrote, total_size,
                                                                           os.path.basename(file_path))))
    return wrote


def download_record(accession=DEFAULT_ACCESSION, output_dir='.'):
    """Fetch the FASTA of an NCBI nucleotide record into ``output_dir/<accession>.fasta``."""
    click.echo(magenta_fg(">>> Attempting to download %s..." % accession))
    if not os.path.exists(output_dir):
        os.makedirs(output_dir)
    file_path = os.path.join(output_dir, "%s.fasta" % accession)
    if os.path.exists(file_path):
        click.echo(yellow_fg(">>> %s already exists, skipping download" % file_path))
        return file_path
    download_url(EFETCH_URL, file_path,
                 params={'db': 'nuccore', 'id': accession, 'rettype': 'fasta', 'retmode': 'text'})
    return file_path
