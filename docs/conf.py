#!/usr/bin/env python3
import sys
import os
import os.path as path
import datetime

# Make autodoc and import work.
if path.exists(path.join('..', 'ircnames')):
    sys.path.insert(0, os.path.abspath('..'))
import ircnames


## General configuration.

project = ircnames.__name__
copyright = '2013-{current}, Shiz'.format(current=datetime.date.today().year)
version = release = ircnames.__version__

extensions = [
    # Generate API description from code.
    'sphinx.ext.autodoc',
    # Generate unit tests from docstrings.
    'sphinx.ext.doctest',
    # Link to Sphinx documentation for related projects.
    'sphinx.ext.intersphinx',
    # Include full source code with documentation.
    'sphinx.ext.viewcode'
]

intersphinx_mapping = {
    'python': ('http://docs.python.org/3', None)
}

templates_path = ['_templates']
exclude_patterns = ['_build']
source_suffix = '.rst'
master_doc = 'index'
pygments_style = 'trac'


## HTML output.

if os.environ.get('READTHEDOCS', None) != 'True':
    import sphinx_rtd_theme
    html_theme = "sphinx_rtd_theme"
    html_theme_path = [ sphinx_rtd_theme.get_html_theme_path() ]

html_show_sphinx = False
htmlhelp_basename = 'ircnamesdoc'

man_pages = [
    ('index', 'ircnames', 'ircnames Documentation', ['Shiz'], 1)
]


## Autodoc.

def skip(app, what, name, obj, skip, options):
    if skip:
        return True
    if name.startswith('_') and name != '__init__':
        return True
    return False

def setup(app):
    app.connect('autodoc-skip-member', skip)
