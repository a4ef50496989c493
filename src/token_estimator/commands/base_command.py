"""Base command class with common functionality for CLI commands."""

import json
from typing import List, Optional
import click


class BaseCommand:
    """Base class providing common utilities for CLI commands."""

    @staticmethod
    def handle_error(error: Exception, context: str = "operation") -> None:
        """
        Standard error handling with user-friendly message.

        Args:
            error: The exception that occurred
            context: Description of what operation failed

        Raises:
            click.Abort: For estimator and configuration errors
        """
        from token_estimator.estimation import TokenEstimatorError

        if isinstance(error, (TokenEstimatorError, ValueError)):
            click.echo(click.style(f'Error during {context}: {error}', fg='red'), err=True)
            raise click.Abort()
        raise error

    @staticmethod
    def write_output(content: str, output_file: Optional[str] = None) -> None:
        """
        Write content to file or stdout with error handling.

        Args:
            content: Text content to write
            output_file: Optional path to output file. If None, prints to stdout.

        Raises:
            click.Abort: If file cannot be written
        """
        if output_file:
            try:
                with open(output_file, "w", encoding="utf-8") as f:
                    f.write(content)
                click.echo(click.style(f'Written to {output_file}', fg='green'), err=True)
            except IOError as e:
                click.echo(click.style(f'Error writing output file: {e}', fg='red'), err=True)
                click.echo(content)
                raise click.Abort()
        else:
            click.echo(content)

    @staticmethod
    def load_string_list(content: str, source: str) -> List[str]:
        """
        Parse a JSON array of strings.

        Args:
            content: Raw JSON text
            source: Name of the input, used in error messages

        Returns:
            The parsed list

        Raises:
            click.Abort: If the content is not a JSON array of strings
        """
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            click.echo(click.style(f'Error parsing JSON from {source}: {e}', fg='red'), err=True)
            raise click.Abort()
        if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
            click.echo(click.style(f'Error: {source} must contain a JSON array of strings', fg='red'), err=True)
            raise click.Abort()
        return data
