from enum import Enum

import click

LINE_LENGTH = 72


class SeqType(Enum):
    DNA = 'dna'
    PROTEIN1 = 'protein1'  # single-letter amino acid code
    PROTEIN3 = 'protein3'  # triple-letter amino acid code

    @property
    def divisor(self):
        # a Protein3 line is numbered in amino acids, not characters
        if self is SeqType.PROTEIN3:
            return 3
        return 1


def format_sequence(s, seq_type):
    """Split a sequence into lines of 72 units, each led by its 1-based position.

    A unit is one character for DNA and one-letter protein and one
    three-letter residue for three-letter protein, so a three-letter line
    holds 216 characters and consecutive lines read 001, 073, 145, ...
    Positions are zero-padded to at least three digits.
    """
    divisor = seq_type.divisor
    width = LINE_LENGTH * divisor
    lines = []
    for i in range(len(s) // width):
        myline = s[i * width:(i + 1) * width]
        lines.append("%03d %s" % ((i * width) // divisor + 1, myline))
    # whatever is left
    remainder = len(s) % width
    if remainder:
        lines.append("%03d %s" % ((len(s) - remainder) // divisor + 1, s[len(s) - remainder:]))
    return lines


def print_sequence(s, seq_type):
    for line in format_sequence(s, seq_type):
        click.echo(line)
