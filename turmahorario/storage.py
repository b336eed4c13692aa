"""
JSON persistence of parsed offerings.

File format: a JSON array with one object per offering, e.g.

    [{"code": "07700", "name": "Algoritmos", "section": "A", "seatCount": 40, ...}]

Integers stay integers (including the -1 workload sentinel) and text is
written as UTF-8 without escaping.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List

from turmahorario.model import Offering


def default_output_path(period: str, base_dir: str | Path | None = None) -> Path:
    """
    Return the default output file for a period: ./turmas_<period>.json
    """
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    # Periods look like "2023.1"; slashes would create directories
    safe_period = period.replace("/", "-").strip() or "sem_periodo"
    return base / f"turmas_{safe_period}.json"


def save_offerings(offerings: Iterable[Offering], path: str | Path) -> Path:
    """
    Write offerings to a JSON file and return its path.

    Creates parent directories if needed.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    payload = [o.to_dict() for o in offerings]
    out.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return out


def load_offerings(path: str | Path) -> List[Offering]:
    """
    Read offerings back from a file written by save_offerings.

    Raises OSError / ValueError / KeyError for missing or malformed files.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array in {path}")
    return [Offering.from_dict(item) for item in data]
