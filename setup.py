"""
Setup script.
Install: pip install -e .[test]
macOS bundle (py2app): python setup.py py2app
"""

import sys

from setuptools import setup

APP = ['app.py']
DATA_FILES = []
OPTIONS = {
    'argv_emulation': True,
    'packages': ['nicegui', 'httpx', 'pandas'],
    'strip': True,
    'compressed': True,
}

bundle_options = {}
if 'py2app' in sys.argv:
    bundle_options = dict(
        app=APP,
        data_files=DATA_FILES,
        options={'py2app': OPTIONS},
        setup_requires=['py2app'],
    )

setup(
    name='walk-history',
    version='1.0.0',
    description='Walking activity history screen',
    python_requires='>=3.10',
    py_modules=['app', 'constants', 'db', 'formatting', 'models', 'state'],
    packages=['core', 'components'],
    install_requires=[
        'nicegui',
        'httpx',
        'pandas',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['walk-history=app:main'],
    },
    **bundle_options,
)
