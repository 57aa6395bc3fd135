from setuptools import setup, find_packages

setup(
    name="s3_bucket_report",
    version="1.0.0",
    description="CSV inventory of S3 bucket region, versioning, encryption, logging and public status",
    long_description="See DESIGN.md for full documentation.",
    long_description_content_type="text/markdown",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["s3_bucket_report", "s3_bucket_report.*"]),
    python_requires=">=3.9",
    install_requires=[
        "boto3>=1.26.0",
    ],
    extras_require={
        "tests": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "s3report=s3_bucket_report.cli:main",
        ],
    },
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Security",
        "Topic :: System :: Systems Administration",
    ],
)
