import os
from setuptools import setup, find_packages


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname), encoding='utf-8').read()


setup(
    name="JecnaPy",
    version="0.1.0",
    description=(
        "A client scraping grades and other student records out of the SPŠE Ječná school web (spsejecna.cz)"),
    license="GPL V3",
    keywords="Jecna SPSE school grades scraper",
    packages=find_packages(exclude=['tests', 'tests.*']),
    long_description=read('README.rst'),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Topic :: Utilities",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Natural Language :: Czech",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
        "Topic :: Text Processing :: Markup :: HTML",
    ], install_requires=['requests', 'beautifulsoup4', 'html5lib'],
    extras_require={'test': ['pytest']}
)
