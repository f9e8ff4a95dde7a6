from setuptools import setup, find_packages


setup(
    name="ivgicons",
    version="0.1.0",
    description="Convert SVG icon sets into normalized IconVG drawing commands",
    # long_description=long_description,
    # long_description_content_type="text/markdown",
    entry_points={
        "console_scripts": ["ivgicons=ivgicons.__main__:main"],
    },
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={
        "ivgicons": ["data/*.yaml"],
    },
    install_requires=[
        "cattrs>=23.1",
        "fonttools>=4.17.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7", "pytest-asyncio>=0.21"],
    },
    python_requires=">=3.11",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Multimedia :: Graphics",
    ],
)
