import argparse
import logging
import sys

from icecream import ic

from core.config import get_settings


def main() -> int:
    ic.configureOutput(prefix="🍦 DEBUG | ")
    parser = argparse.ArgumentParser(description="basemvi - login demo")

    parser.add_argument("--username", "-u", required=True, help="User name to log in with")
    parser.add_argument("--password", "-p", required=True, help="Password")
    parser.add_argument(
        "--endpoint",
        help="Server endpoint without protocol (default: SERVER_ENDPOINT setting)",
    )
    parser.add_argument("--log-level", help="Logging level (default: LOG_LEVEL setting)")
    parser.add_argument("--debug", action="store_true", help="Dump the final UI state")
    args = parser.parse_args()

    settings = get_settings()
    if args.endpoint:
        settings = settings.model_copy(update={"server_endpoint": args.endpoint})

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not args.debug:
        ic.disable()

    from demo.app import DemoApp

    app = DemoApp(settings, args.username, args.password)
    code = app.run()
    ic(app.ui_state)
    return code


if __name__ == "__main__":
    sys.exit(main())
