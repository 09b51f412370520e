from setuptools import setup, find_packages

setup(
    name="bigtime",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"bigtime": ["data/*.txt"]},
    install_requires=[
        "requests>=2.25.0",
        "click>=8.0.0",
        "pytz>=2021.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "bigtime=bigtime.cli:cli",
        ],
    },
    python_requires=">=3.8",
)
