from setuptools import setup, find_packages

# -------------------------------------------------
# Dependencies
# -------------------------------------------------

install_requires = [
    "numpy>=1.21.0",
    "pandas>=1.3.0",
    "pyyaml>=6.0",
    "psutil>=5.9.0",
    "tqdm>=4.64.0",
]

extras_require = {
    "test": [
        "pytest>=7.0",
    ],
}

# -------------------------------------------------
# Setup
# -------------------------------------------------

setup(
    name="window-align",
    version="1.0.0",
    description="Windowed Smith-Waterman batch scoring of source strings against fixed-length queries",
    author="Rowel Facunla",
    author_email="rowel.facunla@tip.edu.ph",
    license="MIT",
    python_requires=">=3.8",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"window_align": ["config/*.yaml"]},
    include_package_data=True,
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "window-align=window_align.scripts.run_pipeline:main",
        ],
    },
    zip_safe=False,
)
