"""Words command for tforth CLI - dictionary listing."""

import io
import json
import sys
from pathlib import Path

import click

from tforth.runtime.environment import Procedure
from tforth.runtime.interpreter import Interpreter


@click.command()
@click.option('--load', '-l', 'load', type=click.Path(exists=True, dir_okay=False),
              help='Evaluate a source file before listing')
@click.option('--json-output', '-j', '--json', 'json_output', is_flag=True, help='Output as JSON')
def words_command(load, json_output):
    """List the words in the dictionary."""
    interpreter = Interpreter(output=io.StringIO())

    if load:
        with open(Path(load)) as f:
            for lineno, line in enumerate(f, start=1):
                result = interpreter.eval(line)
                if not result.success:
                    click.echo(f"! {load}:{lineno}: {result.error_message}", err=True)
                    sys.exit(1)

    dictionary = interpreter.dictionary
    if json_output:
        output = {
            "word_count": len(dictionary),
            "words": dictionary.to_dict(),
        }
        click.echo(json.dumps(output, indent=2))
        return

    click.echo(f"Words: {len(dictionary)}")
    for name in dictionary.names():
        binding = dictionary.lookup(name)
        if isinstance(binding, Procedure):
            click.echo(f"  : {name} {binding.source} ;")
        else:
            click.echo(f"  {name}")
