"""Command-line interface for SquatScan."""

import sys
from pathlib import Path
from typing import Optional

import click

from . import constants
from .core.config import load_config
from .core.engine import MutationEngine
from .exceptions import SquatScanException
from .twister import Twister
from .utils.logger import setup_logger, get_logger, parse_module_levels

logger = get_logger(__name__)


def setup_logging(level: str, module_levels: dict = None) -> None:
    """Setup logging configuration using our custom logger."""
    setup_logger(level=level, module_levels=module_levels)
    logger.debug(f"Logging initialized with level: {level}")


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True),
              help='Configuration file path')
@click.option('--log-level', '-l', default='INFO',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
              help='Logging level')
@click.option('--log-modules', help='Per-module levels, e.g. "engine=DEBUG,resolver=INFO"')
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], log_level: str, log_modules: Optional[str]) -> None:
    """SquatScan - find typosquatting and look-alike domains."""
    setup_logging(log_level, parse_module_levels(log_modules) if log_modules else None)

    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config
    ctx.obj['log_level'] = log_level


@cli.command()
@click.argument('domain')
@click.option('--fuzzers', '-f', help='Comma-separated fuzzer names (default set if omitted)')
@click.option('--tld', multiple=True, type=click.Path(),
              help='TLD dictionary files for tld-swap, comma-separated (can be specified multiple times)')
@click.option('--dictionary', '-d', type=click.Path(), help='Word list for the dictionary fuzzer')
@click.option('--threads', '-t', type=int, help='Number of candidates scanned in parallel')
@click.option('--geoip', '-g', is_flag=True, help='Look up the country of each resolved address')
@click.option('--banners', '-b', is_flag=True, help='Capture HTTP server banners')
@click.option('--mxcheck', '-m', is_flag=True, help='Resolve MX records and capture SMTP greetings')
@click.option('--nscheck', is_flag=True, help='Resolve NS records')
@click.option('--all', '-a', 'all_records', is_flag=True, help='Show all DNS records instead of the first one')
@click.option('--registered', '-r', is_flag=True, help='Show only registered domains')
@click.option('--unregistered', '-u', is_flag=True, help='Show only unregistered domains')
@click.option('--registered-by', type=click.Choice(constants.REGISTERED_BY_TYPES, case_sensitive=False),
              help='Record type that marks a domain as registered')
@click.option('--nameservers', help='Comma-separated DNS servers as host[:port]')
@click.option('--useragent', help='User-Agent for the HTTP probe')
@click.option('--format', 'output_format', type=click.Choice(constants.OUTPUT_FORMATS, case_sensitive=False),
              help='Output format')
@click.option('--output', '-o', type=click.Path(), help='Write output to file instead of stdout')
@click.option('--strict', is_flag=True, help='Fail on unknown fuzzer names')
@click.pass_context
def scan(ctx: click.Context, domain: str, fuzzers: Optional[str], tld: tuple, dictionary: Optional[str],
         threads: Optional[int], geoip: bool, banners: bool, mxcheck: bool, nscheck: bool,
         all_records: bool, registered: bool, unregistered: bool, registered_by: Optional[str],
         nameservers: Optional[str], useragent: Optional[str], output_format: Optional[str],
         output: Optional[str], strict: bool) -> None:
    """Generate permutations of DOMAIN and probe them."""
    try:
        config = load_config(ctx.obj.get('config_path'))

        # Override config with command line options
        config.domain = domain
        if fuzzers is not None:
            config.fuzzers = fuzzers
        if tld:
            config.tld_files = list(tld)
        if dictionary:
            config.dictionary = dictionary
        if threads is not None:
            config.scanner.threads = threads
        if geoip:
            config.scanner.geoip = True
        if banners:
            config.scanner.banners = True
        if mxcheck:
            config.scanner.mxcheck = True
        if nscheck:
            config.scanner.nscheck = True
        if all_records:
            config.scanner.all_records = True
        if registered:
            config.registered = True
        if unregistered:
            config.unregistered = True
        if registered_by:
            config.registered_by = registered_by
        if nameservers:
            config.scanner.nameservers = nameservers
        if useragent:
            config.scanner.user_agent = useragent
        if output_format:
            config.format = output_format.lower()
        if output:
            config.output = output

        twister = Twister(config)
        try:
            results = twister.run(strict=strict)
        finally:
            twister.close()
        text = twister.format(results)

    except (SquatScanException, ValueError, OSError) as e:
        logger.error(f"Scan failed: {e}")
        sys.exit(1)

    if config.output:
        Path(config.output).write_text(text, encoding='utf-8')
        logger.info(f"Wrote {len(results)} results to {config.output}")
    else:
        click.echo(text, nl=not text.endswith('\n'))


@cli.command()
def fuzzers() -> None:
    """List all available fuzzers."""
    engine = MutationEngine.from_domain("example.com")

    click.echo("Available fuzzers:")
    click.echo()
    for info in sorted(engine.list_fuzzers(), key=lambda item: item['name']):
        marker = "*" if info['name'] in constants.DEFAULT_FUZZERS else " "
        click.echo(f"  {marker} {info['name']:<14} {info['description']}")
    click.echo()
    click.echo("* = part of the default set")


@cli.command()
@click.option('--output', '-o', type=click.Path(), default='squatscan.yaml',
              help='Output configuration file path')
@click.option('--force', is_flag=True, help='Overwrite existing file')
def init_config(output: str, force: bool) -> None:
    """Initialize a default configuration file."""
    from .core.config import save_default_config

    output_path = Path(output)

    if output_path.exists() and not force:
        click.echo(f"Configuration file '{output}' already exists. Use --force to overwrite.", err=True)
        sys.exit(1)

    save_default_config(str(output_path))

    click.echo(f"Default configuration saved to '{output}'")
    click.echo("You can now edit this file to customize your scan settings.")


if __name__ == '__main__':
    cli()
