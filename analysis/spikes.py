# analysis/spikes.py
"""Transfer spike detection.

Bytes are summed per fixed-width time bucket (timestamp floored to a multiple
of the bucket width). A bucket is a spike when its total is strictly above
mean + k * std over all bucket totals, using the population standard
deviation. Events without user or session ids still count here.
"""
from __future__ import annotations
import logging
from typing import Dict, Optional, Sequence
import numpy as np
import pandas as pd
from datamodels.events import Event
from constants import DEFAULT_SPIKE_K, DEFAULT_BUCKET_WIDTH

logger = logging.getLogger(__name__)

def bucket_totals(events: Sequence[Event], bucket_width: int = DEFAULT_BUCKET_WIDTH) -> pd.Series:
    """Summed bytes per bucket key, ordered by key."""
    if bucket_width <= 0:
        raise ValueError(f"bucket_width must be positive, got {bucket_width}")
    if not events:
        return pd.Series(dtype="int64")
    df = pd.DataFrame({
        "timestamp": np.fromiter((e.timestamp for e in events), dtype=np.int64, count=len(events)),
        "bytes": np.fromiter((e.bytes_transferred for e in events), dtype=np.int64, count=len(events)),
    })
    df["bucket"] = (df["timestamp"] // bucket_width) * bucket_width
    return df.groupby("bucket")["bytes"].sum().sort_index()

def find_transfer_spikes(events: Sequence[Event], k: Optional[float] = None,
                         bucket_width: Optional[int] = None) -> Dict[int, int]:
    k = DEFAULT_SPIKE_K if k is None else k
    bucket_width = DEFAULT_BUCKET_WIDTH if bucket_width is None else bucket_width

    totals = bucket_totals(events, bucket_width)
    if totals.empty:
        return {}

    values = totals.to_numpy(dtype=np.float64)
    mean = float(values.mean())
    std = float(values.std(ddof=0))
    threshold = mean + k * std
    spikes = totals[values > threshold]

    logger.debug(f"{len(totals)} buckets, mean={mean:.1f}, std={std:.1f}, "
                 f"threshold={threshold:.1f}, spikes={len(spikes)}")
    return {int(bucket): int(total) for bucket, total in spikes.items()}
