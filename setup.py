from setuptools import find_packages, setup

# Use find_packages to automatically discover all packages
packages = find_packages(include=["ziggurat", "ziggurat.*"])

setup(
    name="ziggurat-samplers",
    version="0.1.0",
    packages=packages,
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
        "console_scripts": ["ziggurat-generate=ziggurat.cli.generate:app"],
    },
)
