"""Repl command for tforth CLI - interactive console loop."""

import sys

import click

from tforth.cli.options import config_options, build_config
from tforth.runtime.interpreter import Interpreter


@click.command()
@click.option('--prompt', default='> ', show_default=True, help='Prompt printed before each line')
@click.option('--quiet', '-q', is_flag=True, help='Do not print "ok" after successful lines')
@config_options
def repl_command(prompt, quiet, max_steps, nested_if):
    """Read lines from stdin and evaluate them until EOF."""
    interpreter = Interpreter(config=build_config(max_steps, nested_if))

    while True:
        click.echo(prompt, nl=False)
        try:
            line = sys.stdin.readline()
        except KeyboardInterrupt:
            click.echo()
            continue
        if not line:
            click.echo()
            break

        try:
            result = interpreter.eval(line)
        except KeyboardInterrupt:
            click.echo("! Interrupted", err=True)
            continue

        if result.success:
            if not quiet:
                click.echo("ok")
        else:
            click.echo(f"! {result.error_message}", err=True)
