"""Sample series of a run: raw (t, x, v) arrays with a rounded display view and CSV export."""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

import numpy as np

KEYS = ("t", "x", "v")


@dataclass(frozen=True)
class SamplePoint:
    """One rounded point of the series, as shown in the charts."""

    t: float
    x: float
    v: float


class SampleSeries:
    """
    Immutable series of sampled (t, x, v) points over [0, elapsed].

    The raw arrays hold unrounded values for further computation (scales,
    limits). points(), to_dict(rounded=True) and to_csv() give the values
    rounded to `decimals`, which is what charts show.
    """

    def __init__(
        self,
        t: np.ndarray,
        x: np.ndarray,
        v: np.ndarray,
        decimals: int = 2,
    ) -> None:
        """
        Args:
            t, x, v: same-length 1d arrays, t strictly increasing.
            decimals: display precision.
        """
        self._data: Dict[str, np.ndarray] = {}
        for key, arr in zip(KEYS, (t, x, v)):
            a = np.array(arr, dtype=float).ravel()
            a.setflags(write=False)
            self._data[key] = a
        if not (len(self._data["t"]) == len(self._data["x"]) == len(self._data["v"])):
            raise ValueError("t, x and v must have the same length")
        self.decimals = decimals

    def get(self, key: str, rounded: bool = False) -> np.ndarray:
        """Series for one key ('t', 'x' or 'v') as a numpy array."""
        if key not in self._data:
            raise KeyError(f"unknown series key '{key}', expected one of {KEYS}")
        arr = self._data[key]
        return np.round(arr, self.decimals) if rounded else arr

    @property
    def t(self) -> np.ndarray:
        return self._data["t"]

    @property
    def x(self) -> np.ndarray:
        return self._data["x"]

    @property
    def v(self) -> np.ndarray:
        return self._data["v"]

    def to_dict(self, rounded: bool = False) -> Dict[str, np.ndarray]:
        """All series as a dict of arrays."""
        return {k: self.get(k, rounded=rounded) for k in KEYS}

    def points(self) -> List[SamplePoint]:
        """Rounded points in time order."""
        d = self.to_dict(rounded=True)
        return [
            SamplePoint(t=float(t), x=float(x), v=float(v))
            for t, x, v in zip(d["t"], d["x"], d["v"])
        ]

    def last(self) -> Optional[SamplePoint]:
        pts = self.points()
        return pts[-1] if pts else None

    def to_csv(
        self,
        path: Union[str, Path],
        delimiter: str = ",",
    ) -> None:
        """
        Export rounded values to CSV. Columns t, x, v; one row per sample.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        fmt = f"{{:.{self.decimals}f}}"
        rows = [delimiter.join(fmt.format(p) for p in (pt.t, pt.x, pt.v)) for pt in self.points()]
        header = delimiter.join(KEYS)
        path.write_text(header + "\n" + "\n".join(rows) + "\n", encoding="utf-8")

    def __len__(self) -> int:
        return len(self._data["t"])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SampleSeries):
            return NotImplemented
        return self.decimals == other.decimals and all(
            np.array_equal(self._data[k], other._data[k]) for k in KEYS
        )

    def __repr__(self) -> str:
        end = float(self.t[-1]) if len(self) else 0.0
        return f"SampleSeries(n={len(self)}, t_end={end:.{self.decimals}f}s)"
