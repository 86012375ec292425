from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np
import torch

from sparkplot.errors import SparklineDataError


def coerce_series(data: Any) -> np.ndarray:
    """Return `data` as a read-only 1-D float64 array of finite samples.

    Accepts numpy arrays, torch tensors and plain sequences. Empty input and
    NaN/inf samples are rejected before any geometry is computed.
    """
    arr = _coerce_1d_numeric(data)
    if arr.size == 0:
        raise SparklineDataError("invalid input: empty dataset")

    bad = np.flatnonzero(~np.isfinite(arr))
    if bad.size:
        first = int(bad[0])
        raise SparklineDataError(
            f"invalid input: dataset contains {bad.size} non-finite value(s), first at index {first}: {arr[first]!r}"
        )

    arr = arr.copy()
    arr.setflags(write=False)
    return arr


def _coerce_1d_numeric(value: Any) -> np.ndarray:
    if isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise SparklineDataError("data must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise SparklineDataError("data must be 1-D")
        return _coerce_ndarray(value)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        arr = np.asarray(value, dtype=object)
        if arr.ndim != 1:
            raise SparklineDataError("data must be 1-D")
        return _coerce_ndarray(arr)

    raise SparklineDataError(f"unsupported data input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None or isinstance(raw, (str, bytes)):
            raise SparklineDataError(f"data contains non-numeric value at index {i}: {raw!r}")
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except OverflowError as exc:
            raise SparklineDataError(f"invalid input: value at index {i} is out of float range") from exc
        except (TypeError, ValueError) as exc:
            raise SparklineDataError(f"data contains non-numeric value at index {i}: {raw!r}") from exc
    return out
