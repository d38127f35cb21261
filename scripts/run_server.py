"""
Serve the sales loss diagnostic API with uvicorn.

    python scripts/run_server.py --port 8080 --efficiency-alert 60

--efficiency-alert is exported as EFFICIENCY_ALERT_THRESHOLD before the app
is imported, so it takes precedence over a value in .env.
"""

import argparse
import logging
import os

import uvicorn

logger = logging.getLogger(__name__)

APP_PATH = "sales_diagnostic.api:app"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the sales loss diagnostic API")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["critical", "error", "warning", "info", "debug"],
    )
    parser.add_argument(
        "--efficiency-alert",
        type=float,
        metavar="PERCENT",
        help="Flag efficiency below this percentage (default: 70)",
    )
    return parser


def main():
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level.upper())

    if args.efficiency_alert is not None:
        os.environ["EFFICIENCY_ALERT_THRESHOLD"] = str(args.efficiency_alert)

    logger.info(f"Serving {APP_PATH} on http://{args.host}:{args.port} (POST /diagnostic)")
    uvicorn.run(
        APP_PATH,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
