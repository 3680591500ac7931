from setuptools import setup, find_packages

setup(
    name="sparselsh",
    version="0.1.0",
    description="Sparse-aware vector statistics and locality-sensitive hash families",
    author="adamfilli",
    packages=find_packages(include=["sparselsh", "sparselsh.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
