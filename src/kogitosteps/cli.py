import click
import logging
import traceback
from functools import wraps

from .config import Config
from .registry import StepRegistry
from .steps import ScenarioData, STEP_PATTERNS, register_steps
from .utils import setup_logger, parse_module_levels
from . import constants
from .exceptions import (
    KogitoStepsError,
    ConfigurationError,
    DefinitionError,
    ResolutionError,
    ClusterError,
)
from . import __version__


def setup_logging(debug: bool, log_levels: str = None, log_file: str = None):
    """Setup logger with debug and module-level configuration"""
    module_levels = parse_module_levels(log_levels) if log_levels else None
    setup_logger(debug=debug, module_levels=module_levels, log_file=log_file)


def handle_errors(func):
    """Decorator to log application errors and abort the command"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ConfigurationError as e:
            _abort(f"Configuration error: {e}")
        except ResolutionError as e:
            _abort(f"Resolution error: {e}")
        except DefinitionError as e:
            _abort(f"Definition error: {e}")
        except ClusterError as e:
            _abort(f"Cluster error: {e}")
        except KogitoStepsError as e:
            _abort(f"An unexpected application error occurred: {e}")
    return wrapper


def _abort(message: str):
    logging.error(message)
    ctx = click.get_current_context()
    if ctx.obj.get('debug'):
        traceback.print_exc()
    raise click.Abort()


def _scenario(ctx, namespace: str) -> ScenarioData:
    config = Config(ctx.obj.get('config_file'))
    return ScenarioData.from_config(namespace, config)


def _table(rows):
    return [list(row) for row in rows] if rows else None


@handle_errors
def do_install(ctx, namespace: str):
    _scenario(ctx, namespace).kogito_operator_is_deployed()
    logging.info(f"Operator installed in '{namespace}'.")


@handle_errors
def do_build_example(ctx, namespace: str, runtime: str, context_dir: str, rows):
    holder = _scenario(ctx, namespace).build_example_service_with_configuration(runtime, context_dir, table=_table(rows))
    logging.info(f"Example build '{holder.name}' submitted to '{namespace}'.")


@handle_errors
def do_build_binary(ctx, namespace: str, runtime: str, name: str, rows):
    holder = _scenario(ctx, namespace).build_binary_service_with_configuration(runtime, name, table=_table(rows))
    logging.info(f"Binary build '{holder.name}' submitted to '{namespace}'.")


@handle_errors
def do_step(ctx, namespace: str, phrase: str, rows):
    registry = register_steps(StepRegistry(), _scenario(ctx, namespace))
    registry.run(phrase, table=_table(rows))
    logging.info(f"Step '{phrase}' passed.")


namespace_option = click.option('-n', '--namespace', required=True, help='Namespace the scenario runs in')
row_option = click.option(
    '-r', '--row', 'rows', type=(str, str, str), multiple=True, metavar='CATEGORY SUBKEY VALUE',
    help='Configuration table row, may be repeated'
)


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('-l', '--log-levels', help="Comma-separated per-module log levels (e.g., 'map=DEBUG,res=INFO')")
@click.option('-f', '--log-file', help='Path to log file')
@click.option('-c', '--config', 'config_file', envvar=constants.CONFIG_PATH_ENV, type=click.Path(dir_okay=False),
              help='Harness configuration file (YAML)')
@click.version_option(version=__version__, prog_name='kogito-steps')
@click.pass_context
def cli(ctx, debug, log_levels, log_file, config_file):
    """Kogito Steps - Build and deploy Kogito services the way scenarios do

    \b
    Examples:
      kogito-steps install -n my-ns
      kogito-steps build-example quarkus examples/process-quarkus-example -n my-ns -r native enabled true
      kogito-steps build-binary springboot my-service -n my-ns -r build-limit memory 1Gi
      kogito-steps step 'Kogito Operator is deployed' -n my-ns
    """
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    ctx.obj['config_file'] = config_file
    setup_logging(debug, log_levels, log_file)


@cli.command()
@namespace_option
@click.pass_context
def install(ctx, namespace):
    """Install the Kogito operator into a namespace"""
    do_install(ctx, namespace)


@cli.command('build-example')
@click.argument('runtime', type=click.Choice(['quarkus', 'springboot']))
@click.argument('context_dir')
@namespace_option
@row_option
@click.pass_context
def build_example(ctx, runtime, context_dir, namespace, rows):
    """Build an example service from the examples repository"""
    do_build_example(ctx, namespace, runtime, context_dir, rows)


@cli.command('build-binary')
@click.argument('runtime', type=click.Choice(['quarkus', 'springboot']))
@click.argument('name')
@namespace_option
@row_option
@click.pass_context
def build_binary(ctx, runtime, name, namespace, rows):
    """Create a binary build for a service"""
    do_build_binary(ctx, namespace, runtime, name, rows)


@cli.command()
@click.argument('phrase')
@namespace_option
@row_option
@click.pass_context
def step(ctx, phrase, namespace, rows):
    """Run a single scenario step phrase

    \b
    Examples:
      kogito-steps step 'Build binary quarkus service "svc" with configuration:' -n my-ns -r native enabled x
    """
    do_step(ctx, namespace, phrase, rows)


@cli.command()
def steps():
    """List the supported scenario step phrases"""
    for pattern in STEP_PATTERNS:
        click.echo(pattern)
