"""Trial records and their per-tuple aggregation."""

from collections import defaultdict
from dataclasses import asdict, dataclass

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class TrialRecord:
    """One derived series of one generator run at one target size.

    Missing p-values (test not applicable, or the collaborator refused the
    sample) are stored as ``None``.
    """

    algorithm_id: str
    requested_size: int
    produced_length: int
    ks_p_value: float | None
    shapiro_p_value: float | None


def _mean_or_none(values: list[float]) -> float | None:
    if not values:
        return None
    return float(np.mean(values))


@dataclass(frozen=True)
class AggregateResult:
    """Summary of all trials for one ``(algorithm_id, target_size)`` tuple.

    Means are taken over the trials where the value is present. A tuple with
    no usable p-values reports ``None`` means and zero tested trials.

    Attributes
    ----------
    algorithm_id : str
        Derived series name, e.g. ``"marsaglia_z1"``.
    target_size : int
        Requested sample size ``n``.
    n_trials : int
        Number of trial records the aggregate was computed from.
    mean_produced_length, std_produced_length : float
        Location and spread of the output length across trials.
    mean_ks_p_value, mean_shapiro_p_value : float or None
        Arithmetic means of the available p-values.
    ks_rejections, shapiro_rejections : int
        Number of trials whose p-value is ``<= alpha``.
    n_ks_tested, n_shapiro_tested : int
        Number of trials with a p-value for each test.
    alpha : float
        Significance threshold used for the rejection counts.
    """

    algorithm_id: str
    target_size: int
    n_trials: int
    mean_produced_length: float
    std_produced_length: float
    mean_ks_p_value: float | None
    mean_shapiro_p_value: float | None
    ks_rejections: int
    shapiro_rejections: int
    n_ks_tested: int
    n_shapiro_tested: int
    alpha: float = 0.05

    @classmethod
    def from_records(
        cls, records: list[TrialRecord], alpha: float = 0.05
    ) -> "AggregateResult":
        """Recompute the aggregate from the full set of records of one tuple.

        Raises
        ------
        ValueError
            If ``records`` is empty or mixes several tuples.
        """
        if not records:
            raise ValueError("Cannot aggregate an empty list of trial records")
        keys = {(r.algorithm_id, r.requested_size) for r in records}
        if len(keys) != 1:
            raise ValueError(f"Records span several tuples: {sorted(keys)}")
        algorithm_id, target_size = keys.pop()

        lengths = np.array([r.produced_length for r in records], dtype=float)
        ks = [r.ks_p_value for r in records if r.ks_p_value is not None]
        shapiro = [r.shapiro_p_value for r in records if r.shapiro_p_value is not None]

        return cls(
            algorithm_id=algorithm_id,
            target_size=target_size,
            n_trials=len(records),
            mean_produced_length=float(lengths.mean()),
            std_produced_length=float(lengths.std()),
            mean_ks_p_value=_mean_or_none(ks),
            mean_shapiro_p_value=_mean_or_none(shapiro),
            ks_rejections=sum(p <= alpha for p in ks),
            shapiro_rejections=sum(p <= alpha for p in shapiro),
            n_ks_tested=len(ks),
            n_shapiro_tested=len(shapiro),
            alpha=alpha,
        )

    @property
    def is_missing(self) -> bool:
        """True when no trial produced any p-value."""
        return self.n_ks_tested == 0 and self.n_shapiro_tested == 0

    @property
    def mean_acceptance_rate(self) -> float:
        """Mean produced length per requested candidate."""
        return self.mean_produced_length / self.target_size


class ExperimentResults:
    """Trial records of a harness run keyed by ``(algorithm_id, target_size)``.

    Records are only ever appended. Aggregates are recomputed from the stored
    records on every request.
    """

    def __init__(self, alpha: float = 0.05):
        self.alpha = alpha
        self._records: list[TrialRecord] = []
        self._by_key: dict[tuple[str, int], list[TrialRecord]] = defaultdict(list)
        self.timings: dict[tuple[str, int], list[float]] = defaultdict(list)

    def add(self, record: TrialRecord) -> None:
        self._records.append(record)
        self._by_key[(record.algorithm_id, record.requested_size)].append(record)

    def add_timing(self, generator: str, target_size: int, seconds: float) -> None:
        self.timings[(generator, target_size)].append(seconds)

    @property
    def records(self) -> list[TrialRecord]:
        """All records in the order they were produced."""
        return list(self._records)

    def keys(self) -> list[tuple[str, int]]:
        return list(self._by_key)

    def records_for(self, algorithm_id: str, target_size: int) -> list[TrialRecord]:
        return list(self._by_key.get((algorithm_id, target_size), []))

    def aggregate(self, algorithm_id: str, target_size: int) -> AggregateResult:
        records = self._by_key.get((algorithm_id, target_size))
        if not records:
            raise KeyError(f"No records for ({algorithm_id!r}, {target_size})")
        return AggregateResult.from_records(records, alpha=self.alpha)

    def aggregates(self) -> dict[tuple[str, int], AggregateResult]:
        return {key: self.aggregate(*key) for key in self._by_key}

    def to_dataframe(self) -> pd.DataFrame:
        """One row per ``(algorithm_id, target_size)`` aggregate."""
        rows = [asdict(agg) for agg in self.aggregates().values()]
        return pd.DataFrame(rows)

    def records_dataframe(self) -> pd.DataFrame:
        """One row per trial record."""
        return pd.DataFrame([asdict(r) for r in self._records])

    def timing_dataframe(self) -> pd.DataFrame:
        """Distribution summary of generator invocation times per tuple."""
        rows = []
        for (generator, target_size), times in self.timings.items():
            times = np.asarray(times)
            rows.append(
                {
                    "generator": generator,
                    "target_size": target_size,
                    "n_calls": len(times),
                    "median_seconds": float(np.median(times)),
                    "mean_seconds": float(np.mean(times)),
                    "std_seconds": float(np.std(times)),
                }
            )
        return pd.DataFrame(rows)

    def __len__(self):
        return len(self._records)
