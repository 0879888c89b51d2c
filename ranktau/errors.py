class RankTauError(ValueError):
    """Base class for input errors raised by ranktau."""


class LengthMismatchError(RankTauError):
    def __init__(self, **lengths: int):
        self.lengths = lengths
        described = ", ".join(f"{name}={length}" for name, length in lengths.items())
        super().__init__(f"Sequences must have equal lengths, got {described}")


class InvalidInputError(RankTauError):
    pass


class DegenerateInputError(RankTauError):
    """Raised when a correlated variable is constant, so Tau-b is undefined."""
