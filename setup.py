from setuptools import setup, find_packages

setup(
    name="ChromaKit",
    version="0.1.0",
    description="A Python library for RGB, HSV and hex color conversion",
    packages=find_packages(exclude=["tests"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "numpy>=2.2.0",
    ],  # Core dependencies
    extras_require={
        "test": ["pytest>=8.0"],
    },
)
