"""Plain-text reporting of experiment aggregates."""

from pathlib import Path

from normvar.experiments.records import ExperimentResults


def _fmt(value, format_spec: str) -> str:
    return "-" if value is None else format(value, format_spec)


def format_report(results: ExperimentResults) -> str:
    """Format one line per ``(algorithm_id, target_size)`` aggregate.

    Missing means (no usable p-value in any trial) are shown as ``-``.
    """
    lines = []
    lines.append("=" * 96)
    lines.append("NORMAL VARIATE EXPERIMENT")
    lines.append("=" * 96)
    lines.append(
        f"{'Series':<20} {'n':>8} {'Trials':>7} {'Mean len':>11} {'Std len':>9} "
        f"{'KS p':>8} {'KS rej':>7} {'SW p':>8} {'SW rej':>7}"
    )
    lines.append("-" * 96)

    aggregates = sorted(
        results.aggregates().values(),
        key=lambda agg: (agg.target_size, agg.algorithm_id),
    )
    for agg in aggregates:
        sw_rej = str(agg.shapiro_rejections) if agg.n_shapiro_tested else "-"
        ks_rej = str(agg.ks_rejections) if agg.n_ks_tested else "-"
        lines.append(
            f"{agg.algorithm_id:<20} "
            f"{agg.target_size:>8} "
            f"{agg.n_trials:>7} "
            f"{agg.mean_produced_length:>11.1f} "
            f"{agg.std_produced_length:>9.2f} "
            f"{_fmt(agg.mean_ks_p_value, '.4f'):>8} "
            f"{ks_rej:>7} "
            f"{_fmt(agg.mean_shapiro_p_value, '.4f'):>8} "
            f"{sw_rej:>7}"
        )

    lines.append("-" * 96)
    lines.append(f"Rejections counted at alpha = {results.alpha}")
    return "\n".join(lines)


def save_results(results: ExperimentResults, output_folder: str | Path) -> list[Path]:
    """Write aggregates, trial records and timings as CSV files.

    Returns
    -------
    list[Path]
        The written files.
    """
    output_folder = Path(output_folder)
    output_folder.mkdir(parents=True, exist_ok=True)

    written = []
    for name, frame in (
        ("aggregates.csv", results.to_dataframe()),
        ("trials.csv", results.records_dataframe()),
        ("timings.csv", results.timing_dataframe()),
    ):
        path = output_folder / name
        frame.to_csv(path, index=False)
        written.append(path)
    return written
