from collections import namedtuple

from .translation.errors import InvalidSelection

Gene = namedtuple('Gene', ['number', 'locus_tag', 'description', 'start', 'end', 'reverse'])

# From https://www.ncbi.nlm.nih.gov/nuccore/NC_005816 (0-based, half-open)
gene_catalog = {
    'NC_005816.1': (
        Gene(1, 'YP_RS22210', 'IS21-like element IS100 family transposase', 86, 1109, False),
        Gene(2, 'YP_RS22215', 'AAA family ATPase', 1108, 1888, False),
        Gene(3, 'YP_RS22220', 'Rop family plasmid primer RNA-binding protein', 2924, 3119, False),
        Gene(4, 'YP_RS22225', 'pesticin immunity protein', 4354, 4780, False),
        Gene(5, 'YP_RS22230', 'pesticin', 4814, 5888, True),
        Gene(6, 'YP_RS22235', 'hypothetical protein', 6115, 6421, False),
        Gene(7, 'YP_RS22240', 'omptin family plasminogen activator Pla', 6663, 7602, False),
        Gene(8, 'YP_RS22245', 'XRE family transcriptional regulator', 7788, 8088, True),
        Gene(9, 'YP_RS22250', 'type II toxin-antitoxin system RelE/ParE family toxin', 8087, 8429, True),
    ),
}


def get_genes(accession):
    return gene_catalog.get(accession, ())


def get_gene(accession, number):
    for gene in get_genes(accession):
        if gene.number == number:
            return gene
    raise InvalidSelection("No gene %r is known for record %s" % (number, accession))
