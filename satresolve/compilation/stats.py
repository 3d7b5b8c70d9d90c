import numpy as np
from typing import Any, Dict, List

def clause_length_summary(lengths: List[int]) -> Dict[str, Any]:
    """
    Summarizes the lengths of a clause stream: counts, min/mean/max and a
    histogram with buckets 1..10 plus "overflow".
    """
    hist: Dict[Any, int] = {i: 0 for i in range(1, 11)}
    hist["overflow"] = 0

    if not lengths:
        return {
            "n_clauses": 0,
            "n_units": 0,
            "clause_len": {"min": 0, "mean": 0.0, "max": 0},
            "clause_size_histogram": hist
        }

    arr = np.asarray(lengths, dtype=np.int64)
    counts = np.bincount(arr, minlength=11)
    for size in range(1, 11):
        hist[size] = int(counts[size])
    hist["overflow"] = int(np.sum(arr > 10))

    return {
        "n_clauses": int(arr.size),
        "n_units": int(counts[1]),
        "clause_len": {
            "min": int(arr.min()),
            "mean": float(arr.mean()),
            "max": int(arr.max())
        },
        "clause_size_histogram": hist
    }
