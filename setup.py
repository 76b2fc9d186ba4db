import sys
from setuptools import setup, find_packages

if sys.version_info < (3,6):
    print("matdisplay requires Python 3.6 or later", file=sys.stderr)
    sys.exit(1)

with open("README.md") as f:
    long_desc = f.read()


setup (name = 'matdisplay',
       version = '0.1',
       description = "Text rendering and flat file IO for numeric matrices",
       long_description =  long_desc,
       long_description_content_type = 'text/markdown',

       package_dir = {'': 'src'},
       packages = find_packages('src'),
       install_requires = ['numpy', 'pandas'],
       extras_require = {
            'test': ['pytest', 'hypothesis'],
       },
       zip_safe = False,
       classifiers=[
            'License :: OSI Approved :: BSD License',
            'Operating System :: OS Independent',
            'Programming Language :: Python',
            'Topic :: Scientific/Engineering',
            'Topic :: Scientific/Engineering :: Mathematics',
            'Programming Language :: Python :: 3',
            ],
       )
