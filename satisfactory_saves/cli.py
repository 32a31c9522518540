"""
Command line entry point

satisfactory-saves [-p PORT] [-i IP] [-v] save-directory
"""

import argparse
import logging
import sys

from satisfactory_saves import __version__
from satisfactory_saves.core.config import DEFAULT_IP, DEFAULT_PORT, ConfigError, build_config
from satisfactory_saves.web.local_server import run_server

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_parser():
    parser = argparse.ArgumentParser(
        prog="satisfactory-saves",
        description="HTTP server to list Satisfactory saves and link to download "
                    "or view them in satisfactory calculator.",
    )
    parser.add_argument("save_dir", nargs="?", metavar="save-directory",
                        help="Directory holding the .sav files")
    parser.add_argument("-p", "--port", type=int, default=DEFAULT_PORT,
                        help=f"The port to listen on for HTTP requests (default: {DEFAULT_PORT})")
    parser.add_argument("-i", "--ip", default=DEFAULT_IP,
                        help="The ip address to listen on for HTTP requests (default: all interfaces)")
    parser.add_argument("-v", "--version", action="version", version=__version__,
                        help="Print the current version")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity (default: INFO)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        config = build_config(args.save_dir, ip=args.ip, port=args.port)
    except ConfigError as e:
        print("Failed run", file=sys.stderr)
        print(e, file=sys.stderr)
        return 1

    run_server(config)
    return 0
