# voicer_deploy/cli/main.py
"""Main CLI entry point for voicer-deploy"""

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from ..__version__ import __version__
from ..api.exceptions import ConfigError
from ..constants import APP_NAME, EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_SUCCESS, LOG_FORMAT
from ..services.config_service import ConfigService
from ..services.deploy_service import DeployService
from .utils.output import format_deploy_result

console = Console()


def setup_logging(verbose: bool = False, debug: bool = False, quiet: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
        quiet: Only show errors (ERROR level)
    """
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True
    )


@click.command(name=APP_NAME)
@click.argument('services', nargs=-1)
@click.option('-c', '--config', 'config_path', type=click.Path(dir_okay=False),
              help='Configuration file (YAML)')
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress log output except errors')
@click.version_option(__version__, prog_name=APP_NAME)
def cli(services, config_path, verbose, debug, quiet):
    """Deploy the Voicer platform

    Resets the checkout to the remote branch tip, reinstalls Python
    dependencies when requirements.txt changed, then restarts and
    verifies SERVICES. With no SERVICES every service in the canonical
    list is deployed.

    Examples:

        # Deploy everything
        voicer-deploy

        # Restart only two services
        voicer-deploy voicer-main voicer-stats
    """
    setup_logging(verbose=verbose, debug=debug, quiet=quiet)

    try:
        config = ConfigService(config_path).load()
    except ConfigError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        sys.exit(EXIT_FAILURE)

    result = DeployService(config, console=console).run(list(services))

    console.print()
    format_deploy_result(result, console)

    sys.exit(EXIT_SUCCESS if result.is_success else EXIT_FAILURE)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli.main(prog_name=APP_NAME, standalone_mode=False)

    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)

    except (KeyboardInterrupt, click.Abort):
        console.print("\n[yellow]Deployment interrupted by user[/yellow]")
        sys.exit(EXIT_INTERRUPTED)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    main()
