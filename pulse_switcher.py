# pulse_switcher.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from backend import PulseSinkBackend
from device_filter import DeviceFilter
from errors import ConfigLoadError, SetDefaultError, SwitcherError, format_error_chain
from log_setup import TRACE, configure_logging, level_for
from models import DeviceRecord
from rotation import next_device
from store_config import ConfigStore, load_device_filter

__version__ = "0.3.0"

logger = logging.getLogger("pulse_switcher")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pulse-switcher",
        description="Cycle the default PulseAudio/PipeWire sink through a filtered set of devices.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    noise = p.add_mutually_exclusive_group()
    noise.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Verbose output, can be repeated: once for debug, twice for trace messages.",
    )
    noise.add_argument(
        "-q", "--quiet", action="count", default=0,
        help="Quiet output, can be repeated: warnings/errors only, errors only, then silence.",
    )
    p.add_argument(
        "-c", "--config", dest="config_file", metavar="FILE",
        help="Config file path. Default: $XDG_CONFIG_HOME/pulse-switcher/pulse-switcher.cfg if it exists.",
    )

    sub = p.add_subparsers(dest="cmd", metavar="COMMAND")
    sub.add_parser(
        "list",
        help="List all devices, the devices matched by the config file, and the current default (default command).",
    )
    sub.add_parser(
        "next",
        aliases=["advance"],
        help="Set the next matching device as the default sink. "
        "If the current default does not match, the first matching device is used.",
    )
    return p


def load_filter(config_file: Optional[str], trace: bool = False) -> DeviceFilter:
    if config_file is None:
        return ConfigStore().load_filter(trace=trace)
    try:
        return load_device_filter(config_file, trace=trace)
    except ConfigLoadError as e:
        raise ConfigLoadError(f"failed to load '{config_file}'") from e


def print_devices(title: str, devices: Sequence[DeviceRecord]) -> None:
    print(title)
    for dev in devices:
        print(dev)


def cmd_list(
    backend: PulseSinkBackend,
    all_devs: List[DeviceRecord],
    matching: List[DeviceRecord],
    default_dev: DeviceRecord,
) -> None:
    print(f"Server: {backend.server_label()}\n")
    print_devices("All devices:", all_devs)
    print()
    print_devices("Matching devices:", matching)
    print(f"\nDefault device: {default_dev}")


def cmd_next(
    backend: PulseSinkBackend,
    all_devs: List[DeviceRecord],
    matching: List[DeviceRecord],
    default_dev: DeviceRecord,
) -> None:
    new = next_device(matching, default_dev)
    logger.info("Setting device '%s' as the default sink", new)
    if not backend.set_default_device(new.name):
        raise SetDefaultError("failed setting default device: API returned false")


COMMANDS = {
    "list": cmd_list,
    "next": cmd_next,
    "advance": cmd_next,
}


def run(args: argparse.Namespace) -> None:
    level = level_for(args.verbose, args.quiet)
    configure_logging(level)

    dev_filter = load_filter(args.config_file, trace=level <= TRACE)
    logger.debug("dev_filter:\n%s", dev_filter.describe())

    with PulseSinkBackend() as backend:
        all_devs = backend.list_devices()
        default_dev = backend.get_default_device()
        matching = dev_filter.apply(all_devs)
        COMMANDS[args.cmd or "list"](backend, all_devs, matching, default_dev)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except SwitcherError as e:
        logger.error("%s", format_error_chain(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
