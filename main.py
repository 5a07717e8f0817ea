"""CLI entry point for a home page smoke run."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

import console as console_output
from browser.controller import BrowserController
from config import get_config
from errors import ConfigurationError, DriverError
from pages import HomePage

logger = logging.getLogger(__name__)

_RUNS_DIR = Path("runs")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Open the application home page and report its title")
    parser.add_argument("--url", default=None, help="Page to open (default: APPURL)")
    parser.add_argument(
        "--no-headless",
        action="store_true",
        help="Run browser in visible (non-headless) mode",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


def _setup_logging(run_dir: Path, verbose: bool) -> None:
    log_format = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"
    log_datefmt = "%H:%M:%S"

    # Log to file only, console output goes through Rich
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    file_handler = logging.FileHandler(run_dir / "log.txt", mode="w", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(log_format, datefmt=log_datefmt))
    root_logger.addHandler(file_handler)


def _run(args: argparse.Namespace) -> int:
    config = get_config()
    console_output.config_summary(config)

    url = args.url or config.app_url
    if not url:
        raise ConfigurationError("APPURL", "no URL given and APPURL is not set")

    explicit_timeout = config.explicit_timeout if config.is_set("EXPLICIT_TIMEOUT") else None

    with BrowserController.from_config(config, headless=not args.no_headless) as browser:
        browser.navigate(url)
        home = HomePage(browser.page)
        title = home.get_home_page_title()
        displayed = home.is_displayed(timeout=explicit_timeout)
        browser.screenshot(args.run_dir / "home.png")

    logger.info("Home page title: %r (heading visible: %s)", title, displayed)
    console_output.page_result(url, title, displayed)
    return 0


def main(argv: list[str] | None = None) -> None:
    load_dotenv()

    args = _parse_args(argv)
    args.run_dir = _RUNS_DIR / datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    args.run_dir.mkdir(parents=True, exist_ok=True)
    _setup_logging(args.run_dir, args.verbose)

    try:
        code = _run(args)
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        console_output.error(str(e))
        code = 1
    except DriverError as e:
        logger.exception("Browser error")
        console_output.error(f"browser: {e.message}")
        code = 2
    except KeyboardInterrupt:
        console_output.console.print("\n[yellow]Interrupted by user (Ctrl+C)[/yellow]")
        code = 130

    console_output.console.print(f"[dim]Log: {args.run_dir / 'log.txt'}[/dim]")
    sys.exit(code)


if __name__ == "__main__":
    main()
