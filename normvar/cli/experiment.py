import logging
from importlib.resources import as_file, files
from pathlib import Path
from pprint import pformat

import typer
import yaml

from normvar.benchmark import benchmark_all, compare_generators
from normvar.config import make_experiment_config
from normvar.experiments import ExperimentHarness, format_report, save_results

app = typer.Typer(add_completion=False)


def load_yaml_config(yaml_config_path) -> dict:
    """Load an experiment configuration from YAML, lower-casing its keys."""
    # Handle both file paths and file-like objects (makes mock testing easier)
    if hasattr(yaml_config_path, "read"):
        config_from_yaml = yaml.safe_load(yaml_config_path)
    else:
        with open(yaml_config_path, "rb") as f:
            config_from_yaml = yaml.safe_load(f)
    if config_from_yaml is None:
        return {}
    if not isinstance(config_from_yaml, dict):
        raise ValueError(
            f"Experiment config must be a mapping, got {type(config_from_yaml).__name__}"
        )
    return {k.lower(): v for k, v in config_from_yaml.items()}


def collect_experiment_config(yaml_config_path=None, extra_configs=None) -> dict:
    """Merge the YAML configuration and ``extra_configs`` over the defaults.

    ``None`` values in ``extra_configs`` are ignored so that unset CLI options
    do not override the file.
    """
    config = {}
    if yaml_config_path is not None:
        config.update(load_yaml_config(yaml_config_path))
    config.update({k: v for k, v in (extra_configs or {}).items() if v is not None})
    return make_experiment_config(config)


def _configure_logging(log_level: str) -> None:
    logging.basicConfig(
        level=log_level.upper(), format="%(asctime)s - %(levelname)s - %(message)s"
    )


log_level_option = typer.Option(
    "WARNING",
    "--log-level",
    "-l",
    help="Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    case_sensitive=False,
    show_default=True,
    rich_help_panel="Logging",
    metavar="LEVEL",
    autocompletion=lambda: ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
)

epilog = "Example: `normvar run --config-path myconfig.yaml --output ./results --seed 7`"


@app.command(epilog=epilog)
def run(
    config_path: Path = typer.Option(None, help="Path to the YAML configuration file."),
    output: Path = typer.Option(
        None, help="Directory for CSV results and figures. Nothing is saved if unset."
    ),
    seed: int = typer.Option(None, help="Seed of the shared uniform source."),
    n_trials: int = typer.Option(
        None, "--n-trials", "-n", help="Trials per generator and size.", min=1
    ),
    plot: bool = typer.Option(
        False, "--plot/--no-plot", help="Save figures to the output directory."
    ),
    progress: bool = typer.Option(
        False, "--progress/--no-progress", help="Show a progress bar over trials."
    ),
    log_level: str = log_level_option,
):
    """
    Run the repeated-trial experiment and print the aggregate report.
    """
    _configure_logging(log_level)
    logger = logging.getLogger(__name__)

    if config_path is None:
        logger.info("No config path provided, using default configuration.")
        with as_file(files("normvar.cli") / "experiment_config.yaml") as default_config:
            config = collect_experiment_config(
                default_config, {"seed": seed, "n_trials": n_trials}
            )
    else:
        config = collect_experiment_config(
            config_path, {"seed": seed, "n_trials": n_trials}
        )

    logger.debug("EXPERIMENT CONFIG")
    logger.debug(pformat(config))

    results = ExperimentHarness(config, progress=progress).run()
    typer.echo(format_report(results))

    if output is not None:
        written = save_results(results, output)
        logger.info("Saved results: %s", written)

        if plot:
            # Figures are only written to disk.
            import matplotlib

            matplotlib.use("Agg")
            import matplotlib.pyplot as plt

            from normvar.plotting import plot_p_values, plot_produced_lengths

            for name, fig in (
                ("produced_lengths.png", plot_produced_lengths(results)),
                ("p_values.png", plot_p_values(results)),
            ):
                fig.savefig(Path(output) / name)
                plt.close(fig)
                logger.info("Saved figure: %s", Path(output) / name)
    elif plot:
        logger.warning("--plot requires --output; no figures were saved.")

    logger.info("Experiment finished")


@app.command()
def benchmark(
    sizes: list[int] = typer.Option(
        [100, 1_000, 10_000, 100_000], "--sizes", "-s", help="Target sizes to time."
    ),
    generators: list[str] = typer.Option(
        None, "--generator", "-g", help="Generators to time (default: all)."
    ),
    n_runs: int = typer.Option(10, "--n-runs", help="Timed runs per combination.", min=1),
    seed: int = typer.Option(42, help="Random seed."),
    log_level: str = log_level_option,
):
    """
    Time repeated invocations of each generator at each size.
    """
    _configure_logging(log_level)
    results = benchmark_all(
        sizes=sizes,
        generators=generators or None,
        n_runs=n_runs,
        random_state=seed,
    )
    typer.echo(compare_generators(results))


if __name__ == "__main__":
    app()
