from setuptools import setup, find_packages

setup(
    name="linsolver",
    version="1.0",
    description="Solver for linear systems with Gauss-Jordan elimination, simple and Zeidel iterations",
    long_description=("Solver for linear systems given as augmented matrices. Offers Gauss-Jordan elimination to "
                      "canonical form, simple (Jacobi) and Zeidel (Gauss-Seidel) iterations and a residual "
                      "accuracy check, computed with exact rationals, decimals or floats."),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy", "sympy"],
    extras_require={"test": ["pytest", "pytest-timeout", "scipy"]},
    entry_points={"console_scripts": ["linsolver=linsolver.cli:start_from_command_line"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear systems", "gauss-jordan", "jacobi", "gauss-seidel", "exact arithmetic"],
    zip_safe=False,
)
