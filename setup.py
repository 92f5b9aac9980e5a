"""Install xlpage

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""

import setuptools


def _requires():
    return [
        # CellRichText and load_workbook(rich_text=True)
        "openpyxl>=3.1",
        "pykern",
    ]


setuptools.setup(
    name="xlpage",
    version="20261019.0",
    description="Declarative spreadsheet pages with spanning headers and schema reads",
    author="RadiaSoft LLC",
    author_email="pip@pykern.org",
    install_requires=_requires(),
    extras_require={
        "test": ["pytest>=2.7"],
    },
    packages=setuptools.find_packages(include=("xlpage", "xlpage.*")),
    entry_points={
        "console_scripts": ["xlpage=xlpage.xlpage_console:main"],
    },
    python_requires=">=3.8",
    license="http://www.apache.org/licenses/LICENSE-2.0.html",
    url="http://pykern.org",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python",
        "Topic :: Office/Business :: Financial :: Spreadsheet",
        "Topic :: Software Development :: Libraries",
    ],
)
