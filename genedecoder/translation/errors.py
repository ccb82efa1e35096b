class TranslationError(Exception):
    """Base class for every fatal condition raised while decoding a sequence.

    ``args`` always holds the constructor arguments so the errors survive
    pickling on their way back from joblib workers; the message is built in
    ``__str__``.
    """


class InvalidBase(TranslationError, ValueError):
    def __init__(self, base):
        super(InvalidBase, self).__init__(base)
        self.base = base

    def __str__(self):
        return "Invalid nucleotide: %r" % (self.base,)


class InvalidCodon(InvalidBase):
    def __init__(self, base, codon):
        TranslationError.__init__(self, base, codon)
        self.base = base
        self.codon = codon

    def __str__(self):
        if self.base is None:
            return "Invalid codon %r (a codon has exactly 3 nucleotides)" % (self.codon,)
        return "Invalid codon %r (bad nucleotide %r)" % (self.codon, self.base)


class MisalignedLength(TranslationError, ValueError):
    def __init__(self, length):
        super(MisalignedLength, self).__init__(length)
        self.length = length

    def __str__(self):
        return "Sequence length (%d) is not a multiple of 3" % self.length


class InvalidSelection(TranslationError, IndexError):
    def __init__(self, message, start=None, end=None, length=None):
        super(InvalidSelection, self).__init__(message, start, end, length)
        self.message = message
        self.start = start
        self.end = end
        self.length = length

    def __str__(self):
        return self.message
