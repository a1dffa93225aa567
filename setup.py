from setuptools import setup, find_namespace_packages

setup(
    name="seirsim",
    version="0.1.0",
    description="Deterministic SEIR epidemic simulator with plateau detection",
    packages=find_namespace_packages(include=["seirsim", "seirsim.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.0",
        "numpy>=1.26.0",
        "streamlit>=1.46.0",
        "plotly>=5.20.0",
    ],
    extras_require={
        "dev": ["pytest>=8.0.0"],
    },
    entry_points={
        "console_scripts": ["seirsim=seirsim.core.orchestrator:main"],
    },
)
