from setuptools import setup, find_packages

# Use find_packages to automatically discover all packages
packages = find_packages(include=["normvar", "normvar.*"])

setup(
    name="normvar-simulators",
    version="0.1.0",
    description="Normal variate generators and a repeated-trial validation harness",
    packages=packages,
    package_data={
        "normvar": ["cli/*.yaml"],
    },
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "pandas",
        "scipy",
        "matplotlib",
        "tqdm",
        "pyyaml",
        "typer",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "normvar=normvar.cli.experiment:app",
        ],
    },
)
