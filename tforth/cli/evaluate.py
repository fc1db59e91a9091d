"""Eval command for tforth CLI - one-shot evaluation."""

import io
import json
import sys

import click

from tforth.cli.options import config_options, build_config
from tforth.runtime.interpreter import Interpreter


@click.command()
@click.argument('source', nargs=-1, required=True)
@config_options
@click.option('--json-output', '-j', '--json', 'json_output', is_flag=True, help='Output as JSON')
def eval_command(source, max_steps, nested_if, json_output):
    """Evaluate SOURCE in a fresh session."""
    text = " ".join(source)
    config = build_config(max_steps, nested_if)

    if json_output:
        # Keep stdout clean for the JSON document; printed values go in "output".
        interpreter = Interpreter(config=config, output=io.StringIO())
        result = interpreter.eval(text)
        click.echo(json.dumps(result.to_dict(), indent=2))
        if not result.success:
            sys.exit(1)
        return

    interpreter = Interpreter(config=config)
    result = interpreter.eval(text)
    if result.success:
        click.echo("ok")
    else:
        click.echo(f"! {result.error_message}", err=True)
        sys.exit(1)

