from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="phonecountry",
    version="0.0.1",
    author="Peter Cotton",
    author_email="",
    description="Territory identifiers and calling codes for phone number handling",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/petercotton/phonecountry",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.7",
    install_requires=[
        "pandas>=1.3.0",
        "rapidfuzz>=2.0.0",
        "pycountry>=22.1.10",
        "country_converter>=1.0.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)
