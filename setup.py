from setuptools import setup, find_packages

setup(
    name="seam_convert",
    version="0.1.0",
    description="Seam Convert - JSON body converters for the Seam RPC client",
    author="Oppie.xyz Team",
    packages=find_packages(include=["seam_convert", "seam_convert.*"]),
    install_requires=[
        "pydantic>=2.0.0",
        "pydantic-core>=2.0.0",
        "protobuf>=3.19.0",
        "opentelemetry-api>=1.14.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov",
            "opentelemetry-sdk>=1.14.0",
            "black",
            "isort",
            "pylint",
        ],
    },
    python_requires=">=3.9",
)
