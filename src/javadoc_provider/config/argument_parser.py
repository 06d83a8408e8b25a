"""Argument parsing for the javadoc-provider command."""

import argparse
from typing import List, Optional
from .constants import DEFAULTS, APP


class ArgumentParserBuilder:
    """Builder for creating argument parser with fluent interface."""

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="javadoc-provider",
            description="Extract class and operation documentation for Java REST resources from JavaDoc HTML",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self._get_usage_examples()
        )
        self._add_core_arguments()
        self._add_optional_arguments()

    def _add_core_arguments(self) -> None:
        """Add core required arguments."""
        self.parser.add_argument(
            '--source', '-s',
            type=str,
            required=True,
            action='append',
            help='Java source file declaring the resource (repeat for supertypes and interfaces)'
        )

        self.parser.add_argument(
            '--docs', '-d',
            type=str,
            default=None,
            help='JavaDoc location: directory, .jar/.zip archive or http(s) URL (default: from config)'
        )

    def _add_optional_arguments(self) -> None:
        """Add optional configuration arguments."""
        self.parser.add_argument(
            '--class', '-c',
            dest='class_name',
            type=str,
            default=None,
            help='Qualified or simple name of the resource class (default: first class in the first source)'
        )

        self.parser.add_argument(
            '--generator-version', '-g',
            type=str,
            default=None,
            help='Java version the JavaDoc was generated with, e.g. 1.6 or 1.8 (default: detected)'
        )

        self.parser.add_argument(
            '--config',
            type=str,
            default=None,
            help=f'YAML configuration file (e.g. {DEFAULTS.CONFIG_FILE})'
        )

        self.parser.add_argument(
            '--log-level',
            type=str,
            choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
            default=None,
            help=f'Log level (default: from config, else {DEFAULTS.LOG_LEVEL})'
        )

        self.parser.add_argument(
            '--json',
            action='store_true',
            help='Print the report as JSON'
        )

        self.parser.add_argument(
            '--version', '-V',
            action='version',
            version=APP.VERSION
        )

    def _get_usage_examples(self) -> str:
        """Get formatted usage examples."""
        return """
Examples:
  # Documentation for a resource published as a local javadoc tree
  javadoc-provider --docs target/apidocs --source src/main/java/org/acme/BookStore.java

  # Resource implementing an annotated interface, docs inside a javadoc jar
  javadoc-provider --docs bookstore-javadoc.jar \\
      --source BookStoreImpl.java --source BookStore.java --class BookStoreImpl

  # Legacy 1.6 javadoc served over HTTP, JSON output
  javadoc-provider --docs https://docs.acme.org/api --source BookStore.java -g 1.6 --json
        """

    def build(self) -> argparse.ArgumentParser:
        """Build and return the configured parser."""
        return self.parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments using builder pattern."""
    parser = ArgumentParserBuilder().build()
    return parser.parse_args(argv)
