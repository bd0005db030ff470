from setuptools import setup, find_packages
setup(
    name="two_choice_table",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy", "loguru"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["two-choice-report=two_choice_table.report:main"]},
    python_requires=">=3.9",
)
