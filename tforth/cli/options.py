"""Shared CLI options mapping onto ExecutionConfig."""

import click

from tforth.runtime.executor import ExecutionConfig


def config_options(func):
    """Attach --max-steps / --nested-if to a command."""
    func = click.option('--nested-if', 'nested_if', is_flag=True,
                        help='Count if/then depth instead of stopping at the first then')(func)
    func = click.option('--max-steps', type=click.IntRange(min=1), default=None,
                        help='Abort a line after this many dispatched tokens')(func)
    return func


def build_config(max_steps, nested_if) -> ExecutionConfig:
    return ExecutionConfig(max_steps=max_steps, nested_conditionals=nested_if)
