"""
Entry point for the unifi-network CLI.

Usage:
    unifi-network info                       Show Network application version
    unifi-network sites [--filter EXPR]      List sites
    unifi-network devices SITE               List devices of a site
    unifi-network device SITE DEVICE         Show device details
    unifi-network stats SITE DEVICE          Show latest device statistics
    unifi-network restart SITE DEVICE        Restart a device
    unifi-network clients SITE               List connected clients of a site

Exit Codes:
    0 - Success
    1 - Configuration, API, decode or input error
    2 - Connection error (cannot reach the Network application)
    3 - Authentication error (API key rejected)
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel

from unifi_network import __version__

EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="unifi-network",
        description="Query the UniFi Network integration API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit Codes:
  0   Success
  1   Configuration, API or input error
  2   Connection error (cannot reach the Network application)
  3   Authentication error (API key rejected)

Environment Variables:
  CONFIG_PATH           Path to YAML configuration file
  UNIFI_BASE_URL        Integration API root URL
  UNIFI_API_KEY         API key
  UNIFI_API_KEY_FILE    Path to file containing the API key (Docker secrets)
  UNIFI_VERIFY_SSL      Enable SSL verification (default: true)
  UNIFI_TIMEOUT         Request timeout in seconds (default: 30)
  UNIFI_PAGE_SIZE       Items per page when listing (default: 25)
  UNIFI_LOG_LEVEL       Logging level: DEBUG, INFO, WARNING, ERROR
  UNIFI_LOG_FORMAT      Log format: json or text

Examples:
  UNIFI_BASE_URL=https://192.168.1.1/proxy/network/integration \\
  UNIFI_API_KEY=... UNIFI_VERIFY_SSL=false unifi-network sites
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to YAML configuration file (overrides CONFIG_PATH)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("info", help="Show Network application version")

    sites = commands.add_parser("sites", help="List sites")
    sites.add_argument("--filter", help="Server-side filter expression")

    for name, help_text in (
        ("devices", "List devices of a site"),
        ("clients", "List connected clients of a site"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("site_id", metavar="SITE")

    for name, help_text in (
        ("device", "Show device details"),
        ("stats", "Show latest device statistics"),
        ("restart", "Restart a device"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("site_id", metavar="SITE")
        sub.add_argument("device_id", metavar="DEVICE")

    return parser.parse_args(argv)


def to_jsonable(result: Any) -> Any:
    """Convert models (or lists of them) to JSON-compatible data."""
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True)
    if isinstance(result, list):
        return [to_jsonable(item) for item in result]
    return result


def run_command(client: Any, args: argparse.Namespace) -> Any:
    """Dispatch the parsed command to the matching client method."""
    handlers: Dict[str, Callable[[], Any]] = {
        "info": lambda: client.get_application_info(),
        "sites": lambda: client.list_sites(filter=args.filter),
        "devices": lambda: client.list_devices(args.site_id),
        "clients": lambda: client.list_clients(args.site_id),
        "device": lambda: client.get_device(args.site_id, args.device_id),
        "stats": lambda: client.get_device_statistics(args.site_id, args.device_id),
        "restart": lambda: client.restart_device(args.site_id, args.device_id),
    }
    result = handlers[args.command]()
    if args.command == "restart":
        return {"status": "restart requested", "device_id": args.device_id}
    return result


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code.
    """
    args = parse_args(argv)

    # Import after arg parsing so --help/--version stay fast
    from unifi_network.api import UnifiAPIError, UnifiClient
    from unifi_network.config import ConfigurationError, load_config
    from unifi_network.logging import configure_logging, get_logger

    # Warnings raised while loading config go to stderr too
    configure_logging(log_format="text", log_level="WARNING")

    try:
        settings = load_config(args.config)
    except ConfigurationError as e:
        for message in e.errors:
            print(message, file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(log_format=settings.log_format, log_level=settings.log_level)
    log = get_logger()

    try:
        with UnifiClient.from_settings(settings) as client:
            result = run_command(client, args)
    except UnifiAPIError as e:
        log.debug("command_failed", command=args.command, kind=e.kind.value)
        print(str(e), file=sys.stderr)
        return e.exit_code

    json.dump(to_jsonable(result), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
