import functools
import click
import logging
import traceback

from . import constants
from .config import Config
from .io import create_fs
from .matrix import discover, emit, enforce_strict
from .rules import infer_context
from .utils import setup_logger, parse_module_levels
from .exceptions import (
    BuildMatrixError,
    ConfigurationError,
    OutputError,
    StrictModeError,
)
from . import __version__


def setup_logging(debug: bool, log_levels: str = None, log_file: str = None):
    """Setup logger with debug and module-level configuration"""
    setup_logger(debug=debug, module_levels=parse_module_levels(log_levels), log_file=log_file)


def _fail(message: str, code: int):
    ctx = click.get_current_context()
    logging.error(message)
    if ctx.find_root().obj and ctx.find_root().obj.get('debug'):
        traceback.print_exc()
    ctx.exit(code)


def handle_errors(func):
    """Decorator mapping application errors to log messages and exit codes"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except StrictModeError as e:
            _fail(str(e), constants.EXIT_STRICT)
        except ConfigurationError as e:
            _fail(f"Configuration error: {e}", constants.EXIT_CONFIG)
        except OutputError as e:
            _fail(f"Output error: {e}", constants.EXIT_OUTPUT)
        except BuildMatrixError as e:
            _fail(f"An unexpected application error occurred: {e}", constants.EXIT_UNKNOWN)
    return wrapper


@handle_errors
def do_discover(config_file, root, strict, output, report_missing_dockerfile):
    """Execute discover command"""
    fs = create_fs()
    config = Config(
        config_file,
        fs=fs,
        overrides={
            'root': root,
            'strict': strict,
            'output': output,
            'report_missing_dockerfile': report_missing_dockerfile,
        },
    )
    report = discover(config.root, fs=fs, report_missing_dockerfile=config.report_missing_dockerfile)
    # Outputs go out before the strict gate so CI always sees the diagnostics
    emit(report, output=config.output, fs=fs)
    enforce_strict(report, config.strict)


@click.group()
@click.version_option(version=__version__, prog_name='buildmatrix')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('-l', '--log-levels', envvar=constants.LOG_LEVELS_ENV,
              help='Per-module log levels, e.g. "res=DEBUG,man=INFO"')
@click.option('-f', '--log-file', help='Path to log file')
@click.pass_context
def cli(ctx, debug, log_levels, log_file):
    """Build Matrix - discover a CI build matrix from container image directories

    \b
    Examples:
      buildmatrix discover                        Scan containers/openami
      buildmatrix discover -r images --no-strict  Scan images/, never fail
      buildmatrix infer 1.29.1-debian-12-r0       Show the inferred context
    """
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    setup_logging(debug, log_levels, log_file)


@cli.command(name='discover')
@click.option('-c', '--config', 'config_file', type=click.Path(dir_okay=False),
              help='YAML settings file')
@click.option('-r', '--root', help=f'Image root directory [env {constants.ENV_VARS["root"]}, '
                                   f'default {constants.DEFAULT_ROOT}]')
@click.option('--strict/--no-strict', default=None,
              help=f'Fail when tags or contexts are missing [env {constants.ENV_VARS["strict"]} '
                   f'accepts true/false, 1/0, yes/no, on/off; other values are rejected; default on]')
@click.option('-o', '--output', help=f'Append outputs to this file [env {constants.ENV_VARS["output"]}]')
@click.option('--report-missing-dockerfile/--skip-missing-dockerfile', default=None,
              help='List image directories without any Dockerfile in missing_dockerfile')
def discover_cmd(config_file, root, strict, output, report_missing_dockerfile):
    """Discover the build matrix and emit it as CI outputs

    \b
    Each image directory holds Dockerfiles under <version>/<distro>/ and a
    tags.txt with lines of the form:
      TAG [RELATIVE_CONTEXT]
    """
    do_discover(config_file, root, strict, output, report_missing_dockerfile)


@cli.command()
@click.argument('tags', nargs=-1, required=True)
def infer(tags):
    """Print the context inferred for each TAG

    \b
    Examples:
      buildmatrix infer 3.1.4-alpine-3.18-r1    -> 3.1/alpine-3.18
    """
    for tag in tags:
        click.echo(f"{tag} -> {infer_context(tag)}")
