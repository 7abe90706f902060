# setup.py
from setuptools import setup, find_packages

setup(
    name="groebnerwalk",
    version="0.1.0",
    description="Gröbner basis conversion between monomial orders via the Gröbner walk",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy>=1.24",
        "pandas>=2.0",
        "sympy>=1.12",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    python_requires=">=3.9",
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
