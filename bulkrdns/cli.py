import sys
import time
from typing import TextIO

import click

from . import __version__
from .context import ResolverError
from .engine import Engine
from .log import setup_logging
from .models import Config, PROTOCOLS
from .output import ConsoleOutput


class BulkCommand(click.Command):
    """click command whose usage errors exit with status 1"""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def read_input(stream: TextIO) -> list[str]:
    """Read one address per line, dropping line terminators and blank lines"""
    items = []
    for line in stream:
        line = line.rstrip('\r\n')
        if line.strip():
            items.append(line)
    return items


@click.command(cls=BulkCommand)
@click.option('-t', '--threads', default=8, type=click.IntRange(min=1),
              help='Number of worker threads (default: 8)')
@click.option('-r', '--resolver', required=True,
              help='Resolver address (IP or hostname)')
@click.option('-P', '--protocol', default='udp',
              type=click.Choice(PROTOCOLS, case_sensitive=False),
              help='Resolver protocol (default: udp)')
@click.option('-p', '--port', default=53, type=click.IntRange(0, 65535),
              help='Resolver port (default: 53)')
@click.option('-d', '--domain', 'domain_only', is_flag=True,
              help='Print bare hostnames, grouped by address')
@click.option('--direct', is_flag=True,
              help='Send PTR queries to the resolver instead of the system resolver')
@click.option('-i', '--input', 'input_file', type=click.File('r'), default='-',
              help='Read addresses from FILE instead of stdin')
@click.option('-v', '--verbose', is_flag=True,
              help='Debug logging and run summary on stderr')
@click.version_option(version=__version__)
def main(threads: int, resolver: str, protocol: str, port: int,
         domain_only: bool, direct: bool, input_file: TextIO, verbose: bool):
    """
    bulkrdns - bulk reverse DNS.

    Reads IP addresses, one per line, and prints the hostname(s) of
    each. Lookups run concurrently over a fixed number of threads.

    Examples:

        bulkrdns -r 1.1.1.1 < ips.txt

        bulkrdns -r 8.8.8.8 -P tcp -t 32 -d -i ips.txt
    """
    setup_logging(verbose)
    output = ConsoleOutput()

    config = Config(
        resolver=resolver,
        threads=threads,
        protocol=protocol.lower(),
        port=port,
        domain_only=domain_only,
        direct=direct
    )

    try:
        engine = Engine(config)

        try:
            context = engine.prepare()
        except ResolverError as e:
            output.print_error(f"Failed to resolve DNS server address: {e}")
            sys.exit(1)

        items = read_input(input_file)
        if not items:
            output.print_warning("No addresses on input")

        if verbose:
            output.print_header(config, context, len(items))

        started = time.perf_counter()
        summary = engine.run(items)

        if verbose:
            output.print_summary(summary, time.perf_counter() - started)

    except KeyboardInterrupt:
        output.console.print("\n[yellow]Interrupted[/]")
        sys.exit(130)


if __name__ == '__main__':
    main()
