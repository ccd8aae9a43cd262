import setuptools

if __name__ == "__main__":
    setuptools.setup(
        name="lds",
        version="1.0.0",
        description="Low-discrepancy sequence generators on intervals, circles, disks and n-spheres",
        long_description=open("README.md", encoding="utf-8").read(),
        long_description_content_type="text/markdown",
        license="MIT",
        python_requires=">=3.9",
        packages=setuptools.find_packages(where="src"),
        package_dir={"": "src"},
        install_requires=[
            "numpy>=1.24,<3.0",
            "numba>=0.59",
        ],
        extras_require={
            "test": ["pytest>=7"],
        },
        classifiers=[
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3 :: Only",
            "License :: OSI Approved :: MIT License",
            "Operating System :: OS Independent",
            "Topic :: Scientific/Engineering :: Mathematics",
        ]
    )
