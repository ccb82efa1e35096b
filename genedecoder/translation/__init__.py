from .codons import GENETIC_CODE, THREE_LETTER_CODE, encode_base, lookup_codon, three_letter
from .errors import TranslationError, InvalidBase, InvalidCodon, MisalignedLength, InvalidSelection
from .proteinprocessor import (ProteinProcessor, Translation, translate_codon, translate_sequence,
                               reverse_complement, select_region)
