import pytest


def pytest_addoption(parser):
    # Add option to skip slow tests.
    parser.addoption('--skip-slow', action='store_true', help='skip slow tests')


def pytest_configure(config):
    config.addinivalue_line('markers', 'slow: randomized sweeps over many generated names')


def pytest_runtest_setup(item):
    if 'slow' in item.keywords and item.config.getoption('--skip-slow'):
        pytest.skip('skipping slow test (--skip-slow given)')
