from ..utils import is_scalar


class DiffConfig:
    """Set of options for the diff algorithm to pass around"""

    def __init__(self, *, atomic_paths=None, detect_moves=True, detect_copies=True):
        # Maps path patterns like '/a/*/b' to True (atomic) or False (always recurse),
        # where '*' stands for any array index
        self._atomic_paths = atomic_paths or {}
        self.detect_moves = detect_moves
        self.detect_copies = detect_copies

    @property
    def factorize(self):
        return self.detect_moves or self.detect_copies

    def is_atomic(self, x, path=None):
        "Return True for values that diff should treat as a single atomic value."
        try:
            return self._atomic_paths[path or '/']
        except KeyError:
            return is_scalar(x)
