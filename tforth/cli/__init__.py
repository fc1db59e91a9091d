"""tforth CLI Package - console loop and one-shot commands"""

import logging

import click

from tforth import __version__
from tforth.cli.repl import repl_command
from tforth.cli.run import run_command
from tforth.cli.evaluate import eval_command
from tforth.cli.words import words_command


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def main(verbose):
    """tforth - threaded interpreter for a minimal stack language."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@click.command()
def version_command():
    """Show version info."""
    click.echo(f"tforth {__version__}")


main.add_command(repl_command, "repl")
main.add_command(run_command, "run")
main.add_command(eval_command, "eval")
main.add_command(words_command, "words")
main.add_command(version_command, "version")

__all__ = [
    "main",
    "repl_command",
    "run_command",
    "eval_command",
    "words_command",
    "version_command",
]
