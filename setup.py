from setuptools import setup, find_packages

setup(
    name="gitlens_telemetry",
    version="0.1.0",
    description="GitLens telemetry - OpenTelemetry span pipeline for the GitLens extension",
    author="GitLens Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "opentelemetry-api>=1.27.0,<1.45",
        "opentelemetry-sdk>=1.27.0,<1.45",
        "opentelemetry-exporter-otlp>=1.27.0,<1.45",
        "opentelemetry-semantic-conventions>=0.48b0",
        "requests>=2.25.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov",
            "black",
            "isort",
            "pylint",
        ],
    },
    python_requires=">=3.9",
)
