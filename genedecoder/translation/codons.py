from .errors import InvalidBase

# Translation table 11 (identical to table 1 for the amino acids) from
# https://www.ncbi.nlm.nih.gov/Taxonomy/Utils/wprintgc.cgi
# Bases are ordered T, C, A, G:
# index = (16 * first_base) + (4 * second_base) + third_base
# so TTT = 0, TTC = 1, TTA = 2, ... , GGC = 61, GGA = 62, GGG = 63
GENETIC_CODE = "FFLLSSSSYY**CC*WLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG"

BASE_ORDINALS = {'T': 0, 'C': 1, 'A': 2, 'G': 3}

AMINO_ACIDS = frozenset("ACDEFGHIKLMNPQRSTVWY*")

# O and U keep their historical meanings, letters with no amino acid map to ???
THREE_LETTER_CODE = {'A': 'Ala', 'B': '???', 'C': 'Cys', 'D': 'Asp',
                     'E': 'Glu', 'F': 'Phe', 'G': 'Gly', 'H': 'His',
                     'I': 'Ile', 'J': '???', 'K': 'Lys', 'L': 'Leu',
                     'M': 'Met', 'N': 'Asn', 'O': 'Pyr', 'P': 'Pro',
                     'Q': 'Gln', 'R': 'Arg', 'S': 'Ser', 'T': 'Thr',
                     'U': 'Sel', 'V': 'Val', 'W': 'Trp', 'X': '???',
                     'Y': 'Tyr', 'Z': '???', '*': '***'}


def encode_base(base):
    """Return the 2-bit ordinal of a nucleotide, raising InvalidBase for anything outside ACGT."""
    try:
        return BASE_ORDINALS[base]
    except (KeyError, TypeError):
        raise InvalidBase(base)


def lookup_codon(b0, b1, b2):
    for ordinal in (b0, b1, b2):
        if not 0 <= ordinal <= 3:
            raise ValueError("Base ordinal out of range: %r" % (ordinal,))
    return GENETIC_CODE[16 * b0 + 4 * b1 + b2]


def three_letter(amino_acid):
    return THREE_LETTER_CODE[amino_acid]
