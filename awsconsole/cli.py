"""
AWS Console Login CLI

Opens the AWS web console in the default browser using the temporary
credentials exported in the current shell.
"""

import argparse
import sys

from .config import Config
from .console import run
from .credentials.extractor import CREDENTIAL_VARIABLES, PROFILE_VARIABLE
from .errors import ConsoleLoginError
from .utils.logger import setup_logging

def _required_variables_help() -> str:
    lines = ["Required environment variables:", f"  {PROFILE_VARIABLE} (must match PROFILE_NAME)"]
    lines.extend(f"  {name}" for name in CREDENTIAL_VARIABLES)
    return "\n".join(lines)

def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="aws-console",
        description="Open the AWS console with the credentials of the exported profile",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_required_variables_help(),
    )
    parser.add_argument("profile_name", help="Profile to sign in with, must equal AWS_PROFILE")
    parser.add_argument("--region", "-r", required=True, help="AWS region to open the console in")
    parser.add_argument("--print-url", action="store_true",
                        help="Print the console URL instead of opening a browser")
    parser.add_argument("--timeout", type=float,
                        help="Timeout in seconds for the signin token request")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)

def main(argv=None):
    """Main function."""
    args = parse_args(argv)

    try:
        config = Config()
        setup_logging("DEBUG" if args.verbose else config.log_level)
        if args.timeout is not None:
            config.timeout = args.timeout

        console_url = run(args.profile_name, args.region,
                          launch=not args.print_url, config=config)
    except ConsoleLoginError as e:
        print(f"❌ {e}")
        cause = e.__cause__
        while cause is not None:
            print(f"   caused by: {cause}")
            cause = cause.__cause__
        sys.exit(1)

    if args.print_url:
        print(console_url)
    else:
        print(f"✅ Opened the {args.region} console for profile {args.profile_name}")

if __name__ == "__main__":
    main()
