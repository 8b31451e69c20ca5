from setuptools import setup, find_namespace_packages

setup(
    name="nrel.footprint",
    version="0.1.0",
    description=
    "footprint estimates the CO2 emissions of car trips and compares them with the same trip by public transport.",
    long_description=
    "footprint splits car routes into urban, non-urban and autobahn distances, resolves vehicles from "
    "generic profiles, a local vehicle store or the french 'vehicules commercialises' open data set, "
    "and applies emission factor tables to compute grams of CO2.",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.9",
        "Topic :: Scientific/Engineering"
    ],
    packages=find_namespace_packages(include=["nrel.*"]),
    python_requires=">=3.9",
    install_requires=[
        "immutables",
        "PyYAML",
        "returns",
        "rich",
        "requests",
    ],
    extras_require={
        "dev": ["pytest", "black"],
    },
    include_package_data=True,
    package_data={
        "nrel.footprint.resources": [
            "defaults/*.yaml",
            "emission_factors/*.yaml",
            "vehicles/*.yaml",
        ]
    },
    entry_points={
        'console_scripts': [
            'footprint=nrel.footprint.app.run:run',
        ],
    },
    keywords="transportation emissions co2 footprint vehicles public-transport"
)
