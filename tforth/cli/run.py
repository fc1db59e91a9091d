"""Run command for tforth CLI - evaluate a source file."""

import sys
from pathlib import Path

import click

from tforth.cli.options import config_options, build_config
from tforth.runtime.interpreter import Interpreter


@click.command()
@click.argument('source', type=click.Path(exists=True, dir_okay=False))
@config_options
def run_command(source, max_steps, nested_if):
    """Evaluate SOURCE one line at a time, stopping at the first error."""
    config = build_config(max_steps, nested_if)
    interpreter = Interpreter(config=config)

    with open(Path(source)) as f:
        for lineno, line in enumerate(f, start=1):
            result = interpreter.eval(line)
            if not result.success:
                click.echo(f"! {source}:{lineno}: {result.error_message}", err=True)
                sys.exit(1)
