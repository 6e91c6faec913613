from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: diagnostics bootstrap, resolution of the
effective configuration (defaults or preset, then command-line toggles),
and the single append of the rendered record to today's log file.
"""

import json
import sys
from typing import List, Optional

from thelogger.core.formatter import format_record
from thelogger.core.logger import TheLogger
from thelogger.domain.config import LoggerConfig
from thelogger.domain.errors import SinkUnavailableError, SinkWriteError
from thelogger.domain.presets import delete_preset, get_preset, save_preset
from thelogger.infra.logging import LoggingConfig, configure_logging, get_logger
from thelogger.infra.sink import DailyFileSink
from thelogger.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 on sink failure, 2 on usage errors.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)
    cli_args.validate_call_site_args(parser, args)

    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True))

    if args.delete_preset:
        return _delete_preset(args.delete_preset)

    # 1. Base configuration (defaults vs saved preset)
    base = LoggerConfig()
    if args.preset:
        preset = get_preset(args.preset)
        if preset is None:
            print(f"ERROR: Unknown preset '{args.preset}'", file=sys.stderr)
            return 2
        base = preset

    # 2. Command-line toggles
    try:
        cfg = cli_args.apply_overrides(base, args)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if args.save_preset:
        try:
            save_preset(args.save_preset, cfg)
        except OSError as e:
            logger.error(f"Failed to save preset '{args.save_preset}': {e}")
            print(f"ERROR: Cannot save preset: {e}", file=sys.stderr)
            return 1

    if args.dump_config:
        print(json.dumps(cfg.to_dict(), ensure_ascii=False, indent=2))
        return 0

    message = " ".join(args.message)
    if not message and not args.save_preset:
        print("ERROR: A message is required.", file=sys.stderr)
        return 2
    if not message:
        return 0

    call_site = cli_args.call_site_from_args(args)

    # 3. Render only
    if args.dry_run:
        sys.stdout.write(format_record(cfg, message, call_site))
        return 0

    # 4. Append
    try:
        sink = DailyFileSink(args.logs_dir)
    except SinkUnavailableError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    with TheLogger(sink, cfg) as the_logger:
        try:
            the_logger.log(message, call_site)
        except SinkWriteError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1

    logger.debug(f"Record appended to {sink.path}")
    return 0


def _delete_preset(name: str) -> int:
    try:
        removed = delete_preset(name)
    except OSError as e:
        logger.error(f"Failed to delete preset '{name}': {e}")
        print(f"ERROR: Cannot delete preset: {e}", file=sys.stderr)
        return 1

    if not removed:
        print(f"ERROR: Unknown preset '{name}'", file=sys.stderr)
        return 2

    print(f"Preset '{name}' deleted.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
