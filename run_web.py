#!/usr/bin/env python3
"""
Main entry point for the Courtside schedule viewer web application.

This script launches the Flask-based web server.
"""
import argparse
import logging
import os

from courtside.ui.web_app import run_web_app


def main() -> None:
    parser = argparse.ArgumentParser(description="Serve the tournament schedule viewer.")
    parser.add_argument(
        "--schedule",
        default=os.environ.get("COURTSIDE_SCHEDULE", "data/schedule.json"),
        help="JSON file or HTML page with the schedule records",
    )
    parser.add_argument(
        "--config",
        default=os.environ.get("COURTSIDE_CONFIG"),
        help="tournament config file (days and last day)",
    )
    parser.add_argument("--preferences", default="preferences.json", help="theme preference file")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=7122)
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run_web_app(
        args.schedule,
        config_path=args.config,
        host=args.host,
        port=args.port,
        preferences_path=args.preferences,
    )


if __name__ == "__main__":
    main()
