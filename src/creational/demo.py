#!/usr/bin/env python3
"""
Creational Patterns Demo
Runs every notification creator, then every report factory
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional, Sequence

from .config import AppConfig, ConfigError, ConfigManager
from .notifications import Channel, OutputSink, get_creator, send_notification
from .reports import Department, generate_reports, get_factory
from .utils.logging import LogContext, performance_monitor, setup_logger

logger = logging.getLogger(__name__)

def run_notifications(channels: Iterable[Channel], out: OutputSink = print) -> List[str]:
    """Dispatch one notification per channel"""
    lines = []
    for channel in channels:
        with LogContext(logger, "notifications", variant=channel, level=logging.DEBUG):
            lines.extend(send_notification(get_creator(channel), out))
    return lines

def run_reports(departments: Iterable[Department], out: OutputSink = print) -> List[str]:
    """Generate the full report set for each department"""
    lines = []
    for department in departments:
        with LogContext(logger, "reports", variant=department, level=logging.DEBUG):
            lines.extend(generate_reports(get_factory(department), out))
    return lines

@performance_monitor()
def run_demo(config: Optional[AppConfig] = None, out: OutputSink = print) -> List[str]:
    """
    Run the demonstration sequence

    Args:
        config: Application configuration, defaults select every variant
        out: Sink receiving each output line

    Returns:
        All lines written, in order
    """
    config = config or AppConfig()
    lines = []

    with LogContext(logger, section="notifications", channels=[c.value for c in config.demo.channels]):
        lines.extend(run_notifications(config.demo.channels, out))

    with LogContext(logger, section="reports", departments=[d.value for d in config.demo.departments]):
        lines.extend(run_reports(config.demo.departments, out))

    return lines

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="creational-demo",
        description="Demonstrate the Factory Method and Abstract Factory patterns"
    )

    parser.add_argument("--env", "-e", type=str,
                        help="Configuration environment (development, testing, production)")
    parser.add_argument("--config", "-c", type=str,
                        help="Extra YAML config file merged over the environment config")
    parser.add_argument("--channel", action="append",
                        choices=[c.value for c in Channel],
                        help="Notification channel to run (repeatable, default: all)")
    parser.add_argument("--department", action="append",
                        choices=[d.value for d in Department],
                        help="Report department to run (repeatable, default: all)")
    parser.add_argument("--log-level", type=str,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level, overrides the config")
    parser.add_argument("--structured-logs", action="store_true",
                        help="Emit JSON log lines")

    return parser

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the demo"""
    args = build_parser().parse_args(argv)

    try:
        config = ConfigManager().load_config(args.env, config_file=args.config)
    except ConfigError as e:
        setup_logger("creational", level="ERROR", performance=False)
        logger.error(f"Configuration error: {e}")
        return 1

    if args.channel:
        config.demo.channels = [Channel(c) for c in args.channel]
    if args.department:
        config.demo.departments = [Department(d) for d in args.department]

    setup_logger(
        "creational",
        level=args.log_level or config.effective_log_level(),
        log_file=config.logging.log_file,
        structured=args.structured_logs or config.logging.structured,
        performance=config.logging.performance
    )
    logger.info(f"Running demo (environment: {config.environment.value})")

    run_demo(config)
    return 0

if __name__ == "__main__":
    sys.exit(main())
