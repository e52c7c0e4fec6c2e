from setuptools import setup, find_packages

setup(
    name="date-fragments",
    version="1.1.0",
    description="Composable recognizers for numeric and language-specific dates in text fragments",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "python-dateutil>=2.8.2",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "date-fragments=date_fragments.cli:main",
        ],
    },
    python_requires=">=3.8",
)
