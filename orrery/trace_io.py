import csv
import json
import os
from datetime import datetime
from pathlib import Path

import numpy as np

from .clock import to_julian_date


def export_trace_csv(trace, file, delimiter=","):
    """Export an orbit trace to CSV.

    Parameters
    ----------
    trace : array-like
        ``(n, 3)`` points in km.
    file : str or file-like
        Destination filename or open file object.
    delimiter : str, optional
        Delimiter used between columns (default is ',').
    """
    close = False
    if isinstance(file, (str, bytes, os.PathLike)):
        f = open(file, "w", newline="")
        close = True
    else:
        f = file
    try:
        writer = csv.writer(f, delimiter=delimiter)
        writer.writerow(["index", "x_km", "y_km", "z_km"])
        for i, (x, y, z) in enumerate(np.asarray(trace, dtype=float)):
            writer.writerow([i, repr(float(x)), repr(float(y)), repr(float(z))])
    finally:
        if close:
            f.close()


def save_snapshot(filepath, positions, when: datetime):
    """Serialize body positions (km) at ``when`` to a JSON file."""
    data = {
        "time": when.isoformat(),
        "jd": to_julian_date(when),
        "positions": {name: np.asarray(p, dtype=float).tolist() for name, p in positions.items()},
    }
    Path(filepath).write_text(json.dumps(data, indent=2))


def load_snapshot(filepath):
    """Load a snapshot written by :func:`save_snapshot`.

    Returns
    -------
    tuple
        ``(when, positions)`` with ``positions`` mapping names to arrays.
    """
    data = json.loads(Path(filepath).read_text())
    when = datetime.fromisoformat(data["time"])
    positions = {name: np.asarray(p, dtype=float) for name, p in data.get("positions", {}).items()}
    return when, positions
