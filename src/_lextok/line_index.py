import numpy as np


class LineIndex:
    """
    Maps character offsets of a text to 1-based line and column numbers.

    >>> index = LineIndex("ab\\ncd")
    >>> index.locate(3)
    (2, 1)

    """

    def __init__(self, text):
        code_points = np.frombuffer(
            text.encode("utf-32-le", "surrogatepass"), dtype="<u4"
        )
        newlines = np.flatnonzero(code_points == ord("\n"))
        self.line_starts = np.concatenate(([0], newlines + 1)).astype(np.int64)

    def __len__(self):
        return len(self.line_starts)

    def locate(self, offset):
        """
        :param offset: A 0-based offset into the text.
        :returns: Tuple of line and column of the offset, both 1-based.
        """
        line = int(np.searchsorted(self.line_starts, offset, side="right"))
        return line, offset - int(self.line_starts[line - 1]) + 1

    def locate_all(self, offsets):
        """
        Vectorized version of locate.

        :param offsets: Sequence of 0-based offsets.
        :returns: Tuple of arrays of lines and columns.
        """
        offsets = np.asarray(offsets, dtype=np.int64)
        lines = np.searchsorted(self.line_starts, offsets, side="right")
        return lines, offsets - self.line_starts[lines - 1] + 1
