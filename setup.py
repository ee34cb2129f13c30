from setuptools import setup

setup(
    name='ircnames',
    version='0.1.0',
    packages=[
        'ircnames',
        'ircnames.ctcp',
        'ircnames.utils'
    ],
    install_requires=[],
    extras_require={
        'docs': 'sphinx_rtd_theme',    # the Sphinx theme we use
        'tests': 'pytest',             # collect and run tests
        'coverage': 'pytest-cov'       # get test case coverage
    },
    entry_points={
        'console_scripts': [
            'ircnames-check = ircnames.utils.check:main'
        ]
    },

    author='Shiz',
    author_email='hi@shiz.me',
    keywords='irc nickname channel validation python3',
    description='Validated, case-insensitively compared IRC nicknames and other names for Python 3.',
    license='BSD',

    zip_safe=True,
    test_suite='tests'
)
