class FormatError(ValueError):
    """Raised when an encoded buffer is structurally malformed."""


class TruncatedInput(FormatError, EOFError):
    """The buffer or bitstream ends before a required field or codeword."""


class InvalidTree(FormatError):
    """A code path leads to a child that does not exist in the tree."""


class EmptyInput(FormatError):
    """The frequency table holds no symbols, so no tree can be built."""
