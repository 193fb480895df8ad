import pathlib

import setuptools

here = pathlib.Path(__file__).parent.resolve()

long_description = (here / "README.md").read_text(encoding="utf-8")

setuptools.setup(
    name="quorum-genesis",
    version="0.2.0",
    description="Genesis file generator for Quorum block voting and governance contracts",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    python_requires=">=3.10",
    packages=setuptools.find_packages(include=["genesis_types", "quorum_genesis", "cli"]),
    package_data={"quorum_genesis": ["assets/*.json"]},
    install_requires=[
        "click>=8.1.0,<9",
        "pycryptodome>=3.20.0,<4",
        "pydantic>=2.10.0,<3",
    ],
    extras_require={
        "test": [
            "pytest>=8,<9",
        ],
    },
    entry_points={
        "console_scripts": [
            "quorum-genesis=cli.genesis:main",
        ],
    },
)
