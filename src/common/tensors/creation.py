from __future__ import annotations

from typing import Optional

import numpy as np

from .access_pattern import new_ap
from .flat_iterator import FlatIterator
from .slicer import SliceResult, SliceSpec, slice_ap


def eye(rows: int, cols: Optional[int] = None, k: int = 0, dtype=np.float64) -> np.ndarray:
    """Return a ``(rows, cols)`` array with ones on diagonal ``k``.

    ``k > 0`` selects a superdiagonal, ``k < 0`` a subdiagonal. The ones are
    placed by walking the access pattern: the first ``cols - k`` rows are
    sliced off (when that is fewer than ``rows``) and every ``cols + 1``-th
    offset from the diagonal's first element is set.
    """
    cols = rows if cols is None else cols
    data = np.zeros(rows * cols, dtype=dtype)
    if k >= cols or -k >= rows:
        return data.reshape(rows, cols)

    ap = new_ap((rows, cols))
    first = -k * cols if k < 0 else k
    end = cols - k
    if end > rows:
        view = SliceResult(ap, 0, ap.size())
    else:
        view = slice_ap(ap, ap.size(), SliceSpec(0, end))

    it = FlatIterator(view.ap)
    for offset in it.slice(SliceSpec(first, view.ap.size(), cols + 1)):
        data[view.start + offset] = 1
    return data.reshape(rows, cols)
