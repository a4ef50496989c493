# -*- coding: utf-8 -*-

"""Top-level package for Token Estimator"""

import logging

import click
from dotenv import find_dotenv, load_dotenv

from token_estimator import commands


__author__ = """Maxim Moroz"""
__email__ = 'mmua@users.noreply.github.com'
__version__ = '0.1.0'


_ = load_dotenv(find_dotenv())

# format='%(message)s' gives clean output without logger-name prefixes.
logging.basicConfig(level=logging.INFO, format='%(message)s')


@click.group()
def cli():
    """Estimate LLM token counts"""


cli.add_command(commands.count)
cli.add_command(commands.encodings)
