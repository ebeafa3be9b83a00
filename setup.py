from setuptools import setup

# install with: pip install -e .

setup(
    name='wordfilter',
    version='0.1.0',
    packages=['wordfilter'],
    install_requires=[
        'click',
        'rich',
        'urwid',
        'blinker',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'words = wordfilter.filterui:cli',
            'words-interactive = wordfilter.interactive:cli',
        ],
    },
)
