#!/usr/bin/env python3
"""
Oven control command line.

Usage:
  oven-control program.json                      # dry-run on simulated hardware
  oven-control program.json --hardware modbus --host 192.168.1.50
  oven-control program.json --doctor             # print effective settings and exit
"""
import argparse
import sys
from typing import List, Optional

from oven_control import config
from oven_control.hardware.factory import HardwareFactory
from oven_control.log_setup import FAIL_MARK, OK_MARK, get_cli_logger, set_log_level
from oven_control.oven import Oven, OvenException
from oven_control.program_loader import ProgramLoadError, load_program

logger = get_cli_logger()

EXIT_OK = 0
EXIT_RUN_FAILED = 1
EXIT_BAD_PROGRAM = 2
EXIT_BAD_CONFIG = 3

HARDWARE_TYPES = ("simulation", "modbus")


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="oven-control",
        description="Run a baking program against the oven hardware",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
EXAMPLES:
  oven-control bread.json                          # simulated hardware
  oven-control bread.json --hardware modbus        # controller from OVEN_MODBUS_HOST
  oven-control bread.json --hardware modbus --host 192.168.1.50 --port 502
        """
    )
    parser.add_argument("program", help="Path to the program JSON file")
    parser.add_argument("--hardware", choices=HARDWARE_TYPES, default=config.HARDWARE_TYPE,
                        help="Hardware backend (default from OVEN_HARDWARE_TYPE)")
    parser.add_argument("--host", help="Oven controller host (Modbus backend)")
    parser.add_argument("--port", type=int, help="Oven controller port (default 502)")
    parser.add_argument("--log-level", choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
                        help="Logging level")
    parser.add_argument("--doctor", action="store_true", help="Print effective configuration and exit")
    return parser.parse_args(argv)


def build_hardware_config(args) -> dict:
    hardware_config = dict(config.HARDWARE_CONFIG)
    if args.host:
        hardware_config['host'] = args.host
    if args.port:
        hardware_config['port'] = args.port
    return hardware_config


def print_doctor_report(args, hardware_config: dict) -> None:
    print("=" * 60)
    print("OVEN CONTROL - EFFECTIVE CONFIGURATION")
    print("=" * 60)
    print(f"Program file : {args.program}")
    print(f"Hardware     : {args.hardware}")
    if args.hardware == "modbus":
        print(f"Controller   : {hardware_config['host']}:{hardware_config['port']} "
              f"(timeout {hardware_config['timeout']}s)")
        for name, address in hardware_config['registers'].items():
            print(f"  {name:<16} {address}")
    missing = config.missing_required_keys(args.hardware)
    if missing and not args.host:
        print(f"Missing      : {', '.join(missing)}")
    print("=" * 60)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.log_level:
        set_log_level(args.log_level)

    # argparse does not check a default against choices
    if args.hardware not in HARDWARE_TYPES:
        logger.error(f"{FAIL_MARK} Unknown hardware type '{args.hardware}' (OVEN_HARDWARE_TYPE); "
                     f"expected one of: {', '.join(HARDWARE_TYPES)}")
        return EXIT_BAD_CONFIG

    hardware_config = build_hardware_config(args)

    if args.doctor:
        print_doctor_report(args, hardware_config)
        return EXIT_OK

    try:
        program = load_program(args.program)
    except ProgramLoadError as e:
        logger.error(f"{FAIL_MARK} {e}")
        return EXIT_BAD_PROGRAM

    hardware = HardwareFactory.create(args.hardware, hardware_config)
    try:
        Oven(hardware.heating_module, hardware.fan).start(program)
    except OvenException as e:
        logger.error(f"{FAIL_MARK} Program aborted: {e} (cause: {e.cause!r})")
        return EXIT_RUN_FAILED
    finally:
        hardware.close()

    logger.info(f"{OK_MARK} Program completed")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
