"""
Command-line entry point for tinysh.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import LOG_LEVELS, ShellConfig
from .exceptions import ConfigError, ShellExit, ShellFatalError
from .process import SPAWNERS
from .shell import Shell

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tinysh',
        description='A minimal interactive command interpreter.',
    )
    parser.add_argument('-c', dest='command', metavar='LINE',
                        help='execute a single command line and exit')
    parser.add_argument('--prompt', help='prompt string (default: "$ ")')
    parser.add_argument('--spawner', choices=sorted(SPAWNERS),
                        help='how external programs are started')
    parser.add_argument('--log-level', choices=LOG_LEVELS, type=str.upper,
                        help='logging threshold (default: WARNING)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='shorthand for --log-level DEBUG')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    return parser


def configure_logging(config: ShellConfig) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(
        stream=sys.stderr,
        level=config.log_level_value,
        format='[%(asctime)s] %(levelname)s %(name)s: %(message)s',
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ShellConfig.from_env().override(
            prompt=args.prompt,
            spawner=args.spawner,
            log_level='DEBUG' if args.verbose else args.log_level,
        )
    except ConfigError as e:
        parser.error(str(e))

    configure_logging(config)
    shell = Shell(config=config)

    try:
        if args.command is not None:
            return shell.execute(args.command)
        return shell.run()
    except ShellExit as e:
        return e.exit_code
    except ShellFatalError as e:
        logger.error("%s", e)
        return e.exit_code


if __name__ == '__main__':
    sys.exit(main())
