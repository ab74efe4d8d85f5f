import click
import functools
import logging
import traceback
from pathlib import Path

from . import constants
from .config import Config
from .builder import Builder
from .io import create_fs
from .utils import setup_logger
from .exceptions import SitesmithError
from .version import get_version


def setup_logging(debug: bool, log_levels: str = None, log_file: str = None):
    """Setup logger with debug and module-level configuration"""
    module_levels = None
    if log_levels:
        module_levels = {}
        for pair in log_levels.split(','):
            pair = pair.strip()
            if not pair or '=' not in pair:
                continue
            name, lvl = pair.split('=', 1)
            module_levels[name.strip()] = lvl.strip().upper()

    setup_logger(debug=debug, module_levels=module_levels, log_file=log_file)


def handle_errors(func):
    """Decorator to turn application errors into a failed exit status"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SitesmithError as e:
            logging.error(f"Build failed: {e}")
            ctx = click.get_current_context()
            if ctx.obj.get('debug'):
                traceback.print_exc()
            raise click.exceptions.Exit(1)
        except Exception as e:
            logging.error(f"An unexpected error occurred: {e}")
            ctx = click.get_current_context()
            if ctx.obj.get('debug'):
                traceback.print_exc()
            raise click.exceptions.Exit(1)
    return wrapper


def load_config(path: str, config_file: str = None) -> Config:
    """Site config from `--config`, or `sitesmith.yml` in the site directory when present"""
    fs = create_fs()
    site_dir = Path(path).resolve()
    if config_file:
        return Config.from_file(Path(config_file).resolve(), fs)
    default_file = site_dir / constants.CONFIG_FILENAME
    if fs.is_file(default_file):
        return Config.from_file(default_file, fs)
    logging.warning(f"No '{constants.CONFIG_FILENAME}' found in '{site_dir}', using default configuration.")
    config = Config(None, fs)
    config.set_source_dir(site_dir)
    config.set_destination_dir(None)
    return config


@handle_errors
def do_build(path: str, config_file: str, options: dict, destination: str, baseurl: str):
    """Execute build command"""
    config = load_config(path, config_file)
    if baseurl is not None:
        config.model = config.model.model_copy(update={"baseurl": baseurl})
    if destination:
        config.set_destination_dir(Path(destination).resolve())

    builder = Builder(config, logger=logging.getLogger("sitesmith"), fs=config.fs)
    if options["dry-run"]:
        logging.info("Dry run: nothing will be written")
    builder.build(options)


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('-l', '--log-levels', help="Comma-separated per-module log levels (e.g., 'pages=DEBUG,gen=INFO')")
@click.option('-f', '--log-file', help='Path to log file')
@click.version_option(version=get_version(), prog_name='sitesmith')
@click.pass_context
def cli(ctx, debug, log_levels, log_file):
    """sitesmith - Build a static website from pages, data and layouts

    \b
    Examples:
      sitesmith build                 Build the site in the current directory
      sitesmith build site --drafts   Build including drafts
      sitesmith build --dry-run       Build without writing anything
    """
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    setup_logging(debug, log_levels, log_file)


@cli.command()
@click.argument('path', default='.', type=click.Path(exists=True, file_okay=False))
@click.option('-c', '--config', 'config_file', type=click.Path(dir_okay=False), help='Config file (default: PATH/sitesmith.yml)')
@click.option('-d', '--drafts', is_flag=True, help='Include drafts')
@click.option('--dry-run', is_flag=True, help='Build without saving')
@click.option('-p', '--page', default='', help='Build only one page (path relative to the pages directory)')
@click.option('--destination', help='Destination directory (default: PATH)')
@click.option('-u', '--baseurl', help='Override the configured base URL')
@click.option('--debug', is_flag=True, help='Enable debug logging for this command')
@click.option('-f', '--log-file', help='Path to log file')
@click.pass_context
def build(ctx, path, config_file, drafts, dry_run, page, destination, baseurl, debug, log_file):
    """Build the website"""
    if debug and not ctx.obj.get('debug'):
        ctx.obj['debug'] = True
        setup_logging(debug=True, log_levels=None, log_file=log_file)
    options = {"drafts": drafts, "dry-run": dry_run, "page": page}
    do_build(path, config_file, options, destination, baseurl)


@cli.command()
def version():
    """Print the sitesmith version"""
    click.echo(get_version())


if __name__ == '__main__':
    cli()
