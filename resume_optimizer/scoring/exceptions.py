# resume_optimizer/scoring/exceptions.py


class ScoringError(Exception):
    """Base class for score simulation errors"""


class InvalidIndexError(ScoringError, IndexError):
    """Toggle or lookup referenced an item that does not exist"""

    def __init__(self, kind: str, index: int, size: int):
        self.kind = kind
        self.index = index
        self.size = size
        super().__init__(f"Invalid {kind} index: {index} (have {size})")
