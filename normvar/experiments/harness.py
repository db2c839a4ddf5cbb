"""Repeated-trial experiment harness for the normal variate generators.

For every target size and every configured generator the harness runs
``n_trials`` independent invocations on one shared uniform source, splits
paired generators into their two streams, and tests every resulting series
against the normal distribution. Everything runs sequentially so that a fixed
seed reproduces bit-identical trial records.
"""

import logging
import time

import tqdm

from normvar.config import get_generator_config, make_experiment_config
from normvar.errors import DegenerateSample, TestPrecondition
from normvar.experiments.goodness_of_fit import ks_test, shapiro_test
from normvar.experiments.records import ExperimentResults, TrialRecord
from normvar.generators.uniform_source import UniformSource

logger = logging.getLogger(__name__)


class ExperimentHarness:
    """Drive repeated trials of the configured generators.

    Attributes
    ----------
        config: dict
            Validated experiment configuration (see
            ``normvar.config.get_default_experiment_config()``).
        source: UniformSource
            The one uniform source shared by all generators and by the KS
            reference draws.

    Methods
    -------
        run()
            Run every (generator, target size) combination.
        run_trial(generator, n)
            Run one generator once and test each of its streams.

    Examples
    --------
    >>> harness = ExperimentHarness({"target_sizes": [100], "n_trials": 5})
    >>> results = harness.run()
    >>> results.aggregate("box_muller_z1", 100).n_trials
    5
    """

    def __init__(
        self,
        config: dict | None = None,
        source: UniformSource | None = None,
        progress: bool = False,
    ):
        """Initialize the harness.

        Arguments
        ---------
        config: dict or None
            Overrides merged over the default experiment configuration.
        source: UniformSource or None
            Shared uniform source. If None, a fresh one is seeded from
            ``config["seed"]`` at the start of every run.
        progress: bool
            Show a tqdm progress bar over trials.
        """
        self.config = make_experiment_config(config)
        self._given_source = source
        self._source = source
        self.progress = progress

    @property
    def source(self) -> UniformSource:
        if self._source is None:
            self._source = UniformSource(self.config["seed"])
        return self._source

    def _ks_p_value(self, stream) -> float:
        if self.config["ks_reference"] == "norm":
            return ks_test(
                stream, "norm", args=(self.config["mu"], self.config["sigma"])
            )
        if len(stream) == 0:
            raise DegenerateSample("Cannot test an empty sample")
        reference = self.source.normal(
            len(stream), self.config["mu"], self.config["sigma"]
        )
        return ks_test(stream, reference)

    def _test_stream(self, algorithm_id: str, n: int, stream) -> TrialRecord:
        try:
            ks_p = self._ks_p_value(stream)
        except (DegenerateSample, TestPrecondition) as e:
            logger.debug("KS test skipped for %s (n=%d): %s", algorithm_id, n, e)
            ks_p = None

        shapiro_p = None
        if n <= self.config["shapiro_max_size"]:
            try:
                shapiro_p = shapiro_test(stream)
            except (DegenerateSample, TestPrecondition) as e:
                logger.debug(
                    "Shapiro test skipped for %s (n=%d): %s", algorithm_id, n, e
                )

        return TrialRecord(
            algorithm_id=algorithm_id,
            requested_size=n,
            produced_length=len(stream),
            ks_p_value=ks_p,
            shapiro_p_value=shapiro_p,
        )

    def run_trial(
        self, generator: str, n: int, results: ExperimentResults | None = None
    ) -> list[TrialRecord]:
        """Run ``generator`` once at size ``n`` and test each derived series.

        Returns
        -------
        list[TrialRecord]
            One record per stream, in stream order.
        """
        generator_config = get_generator_config(generator)

        start = time.perf_counter()
        batch = generator_config["generator"](
            n,
            mu=self.config["mu"],
            sigma=self.config["sigma"],
            source=self.source,
        )
        elapsed = time.perf_counter() - start
        if results is not None:
            results.add_timing(generator, n, elapsed)

        records = []
        for algorithm_id, stream in zip(
            generator_config["stream_names"], batch.streams()
        ):
            record = self._test_stream(algorithm_id, n, stream)
            records.append(record)
            if results is not None:
                results.add(record)
        return records

    def run(self) -> ExperimentResults:
        """Run all trials for every target size and generator.

        Returns
        -------
        ExperimentResults
            The appended trial records plus invocation timings.
        """
        config = self.config
        if self._given_source is None:
            self._source = UniformSource(config["seed"])
        results = ExperimentResults(alpha=config["alpha"])

        logger.info(
            "Starting experiment: sizes=%s, trials=%d, generators=%s, seed=%s",
            config["target_sizes"],
            config["n_trials"],
            config["generators"],
            config["seed"],
        )

        for n in config["target_sizes"]:
            for generator in config["generators"]:
                for _ in tqdm.tqdm(
                    range(config["n_trials"]),
                    desc=f"{generator} n={n}",
                    unit="trial",
                    disable=not self.progress,
                ):
                    self.run_trial(generator, n, results=results)

                for algorithm_id in get_generator_config(generator)["stream_names"]:
                    aggregate = results.aggregate(algorithm_id, n)
                    if aggregate.is_missing:
                        logger.warning(
                            "No usable p-values for %s at n=%d", algorithm_id, n
                        )
                    logger.debug("Aggregate: %s", aggregate)

        logger.info("Experiment finished: %d trial records", len(results))
        return results


def run_experiment(
    config: dict | None = None,
    source: UniformSource | None = None,
    progress: bool = False,
) -> ExperimentResults:
    """Convenience wrapper: build an ``ExperimentHarness`` and run it."""
    return ExperimentHarness(config=config, source=source, progress=progress).run()
