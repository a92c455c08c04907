"""
Command line front end for the plus code codec.

Usage:
    python -m src.main_pluscode encode LAT LNG [LENGTH]
    python -m src.main_pluscode decode CODE
    python -m src.main_pluscode shorten CODE LAT LNG
    python -m src.main_pluscode recover SHORT_CODE LAT LNG
    python -m src.main_pluscode validate CODE
"""

import sys
from typing import List, Optional

from src.config.config_module import ConfigError, load_codec_settings, load_config
from src.config.logger_module import initialize_logger, log_error, log_info, log_warning
from src.pluscode import (
    PlusCodeError,
    decode,
    encode,
    is_full,
    is_short,
    is_valid,
    recover_nearest,
    shorten,
)

USAGE = __doc__.split("Usage:")[1].rstrip()

# Number of positional arguments each command accepts (min, max).
COMMAND_ARITY = {
    "encode": (2, 3),
    "decode": (1, 1),
    "shorten": (3, 3),
    "recover": (3, 3),
    "validate": (1, 1),
}


def run_command(command: str, args: List[str], default_code_length: int) -> str:
    """
    Run a single codec command and format its result.
    
    Args:
        command: One of the COMMAND_ARITY keys
        args: Positional arguments for the command
        default_code_length: Length used by encode when none is given
        
    Returns:
        Text to print
        
    Raises:
        PlusCodeError: On invalid codes or lengths
        ValueError: On non-numeric coordinates
    """
    if command == "encode":
        code_length = int(args[2]) if len(args) > 2 else default_code_length
        return encode(float(args[0]), float(args[1]), code_length)
    
    if command == "decode":
        area = decode(args[0])
        return (
            f"south-west: {area.latitude_lo}, {area.longitude_lo}\n"
            f"north-east: {area.latitude_hi}, {area.longitude_hi}\n"
            f"center: {area.latitude_center}, {area.longitude_center}\n"
            f"length: {area.code_length}"
        )
    
    if command == "shorten":
        return shorten(args[0], float(args[1]), float(args[2]))
    
    if command == "recover":
        return recover_nearest(args[0], float(args[1]), float(args[2]))
    
    code = args[0]
    return f"valid: {is_valid(code)}\nshort: {is_short(code)}\nfull: {is_full(code)}"


def main(argv: Optional[List[str]] = None) -> int:
    """Run the plus code command line. Returns the process exit status."""
    argv = sys.argv[1:] if argv is None else argv
    
    load_config()
    try:
        settings = load_codec_settings()
    except ConfigError as e:
        print(f"❌ Configuration error: {e}")
        return 1
    
    initialize_logger(log_level=settings.log_level, log_file=settings.log_file)
    
    if not argv or argv[0] not in COMMAND_ARITY:
        log_warning(f"Unknown command: {argv[:1]}")
        print(f"Usage:{USAGE}")
        return 2
    
    command, args = argv[0], argv[1:]
    min_args, max_args = COMMAND_ARITY[command]
    if not min_args <= len(args) <= max_args:
        log_warning(f"{command} takes {min_args} to {max_args} arguments, got {len(args)}")
        print(f"Usage:{USAGE}")
        return 2
    
    log_info(f"Running {command} with {args}")
    try:
        print(run_command(command, args, settings.default_code_length))
    except PlusCodeError as e:
        print(f"❌ {e}")
        return 1
    except ValueError as e:
        log_error(f"Bad numeric argument for {command}: {e}")
        print(f"❌ Invalid number: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
