from enum import Enum

from .codons import encode_base, lookup_codon, three_letter
from .errors import InvalidBase, InvalidCodon, InvalidSelection, MisalignedLength


class Translation(Enum):
    ONE_LETTER = 1
    THREE_LETTER = 3


class ProteinProcessor(object):
    """Codon translation and strand handling for in-memory sequences.

    The processor holds no state of its own; every method works on the
    sequence it is given and the read-only tables in ``codons``.
    """

    base_complement = {'A': 'T', 'T': 'A', 'G': 'C', 'C': 'G'}

    def translate_codon(self, triplet, mode=Translation.ONE_LETTER):
        if len(triplet) != 3:
            raise InvalidCodon(None, triplet)
        try:
            codon = [encode_base(base) for base in triplet]
        except InvalidBase as err:
            raise InvalidCodon(err.base, triplet)
        amino_acid = lookup_codon(*codon)
        if mode is Translation.ONE_LETTER:
            return amino_acid
        if mode is Translation.THREE_LETTER:
            return three_letter(amino_acid)
        raise ValueError("Unknown translation mode: %r" % (mode,))

    def translate_sequence(self, seq, mode=Translation.ONE_LETTER):
        if not isinstance(mode, Translation):
            raise ValueError("Unknown translation mode: %r" % (mode,))
        if len(seq) % 3 != 0:
            raise MisalignedLength(len(seq))
        protein_sequence = []
        for i in range(0, len(seq), 3):
            protein_sequence.append(self.translate_codon(seq[i:i + 3], mode))
        return "".join(protein_sequence)

    def _complement(self, s):
        letters = []
        for base in s:
            if base not in self.base_complement:
                raise InvalidBase(base)
            letters.append(self.base_complement[base])
        return ''.join(letters)

    def reverse_complement(self, s):
        return self._complement(s[::-1])

    def select_region(self, seq, start, end):
        """Return ``seq[start:end]`` (0-based, half-open), refusing ranges outside the sequence."""
        if start < 0 or end > len(seq) or start >= end:
            raise InvalidSelection("Selected range %d..%d is outside the sequence (length %d)"
                                   % (start, end, len(seq)), start=start, end=end, length=len(seq))
        return seq[start:end]


_processor = ProteinProcessor()

translate_codon = _processor.translate_codon
translate_sequence = _processor.translate_sequence
reverse_complement = _processor.reverse_complement
select_region = _processor.select_region
