from pathlib import Path

from setuptools import find_packages, setup


with Path("requirements.txt").open() as requirements_file:
    install_requires = [line.strip() for line in requirements_file if line.strip() and not line.startswith("#")]

setup(
    name="week_logs",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"week_logs": ["reports/templates/*.html"]},
    install_requires=install_requires,
    extras_require={"test": ["pytest>=7.4"]},
    entry_points={"console_scripts": ["week-logs=week_logs.main:main"]},
    python_requires=">=3.11",
)
