import setuptools
from pathlib import Path

with Path("README.md").open(encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="staggerpanel",
    version="0.1.0",
    author="StaggerPanel contributors",
    description="Staggered (masonry) layout engine with measure/arrange passes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        "pandas>=1.3.0",
        "numpy>=1.20.0",
        "matplotlib>=3.5.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    packages=setuptools.find_packages(),
    entry_points={
        "console_scripts": [
            "staggerpanel=staggerpanel.__main__:main",
        ],
    },
    python_requires=">=3.8",
)
