"""
Main entry point for the fuzzy tipping controller.

This script loads settings from config/tip_config.toml, initializes logging
and the TipController, then computes a tip from the star ratings given on
the command line. Several ratings may be given to evaluate a series of
cycles; each cycle is tagged with its index in the logs.
"""

import argparse
import logging
import os
import sys
import tomllib

from utils.config import load_config
from utils.logger import setup_logging, set_cycle_index
from utils.profiler import CodeProfiler
from flc.controller import TipController

DEFAULT_CONFIG = os.path.join(os.path.dirname(__file__), "config", "tip_config.toml")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Compute a tip with a fuzzy controller.")
    parser.add_argument("--service", type=float, nargs="+", required=True,
                        help="Service rating(s) in stars (1-5).")
    parser.add_argument("--food", type=float, nargs="+",
                        help="Food rating(s) in stars (1-5), one per service rating.")
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="Path to the TOML config.")
    parser.add_argument("--plot", action="store_true",
                        help="Plot the service and food membership functions.")
    args = parser.parse_args(argv)
    if args.food is not None and len(args.food) != len(args.service):
        parser.error("--food needs one rating per --service rating")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        cfg = load_config(args.config)
    except (FileNotFoundError, tomllib.TOMLDecodeError, ValueError) as e:
        print(f"Cannot load configuration '{args.config}': {e}", file=sys.stderr)
        return 1

    log_cfg = cfg["logging"]
    setup_logging(
        log_dir=log_cfg["log_dir"],
        overwrite=log_cfg["overwrite"],
        log_level=log_cfg["level"],
        console_level=log_cfg["console_level"],
        cleanup_rotated=log_cfg["cleanup_rotated"],
    )
    main_log = logging.getLogger("main")
    main_log.info("Configuration file '%s' loaded.", args.config)

    try:
        controller = TipController(cfg["tips"])
        foods = args.food or [None] * len(args.service)
        for i, (service, food) in enumerate(zip(args.service, foods)):
            set_cycle_index(i)
            with CodeProfiler("Tip Cycle", cfg["profiler"]["latency_ms"]):
                tip = controller.compute_tip(service, food)
            main_log.info("service= %s, food= %s -> tip= %.4f", service, food, tip)
            print(f"{tip:.4f}")

        if args.plot:
            from utils.plot_membership_shapes import plot_membership_functions

            plot_membership_functions(
                {
                    "Poor": controller.service_poor,
                    "Ok": controller.service_ok,
                    "Excellent": controller.service_excellent,
                },
                "Service",
                (0.0, 6.0),
            )
            plot_membership_functions(
                {"Rancid": controller.food_rancid, "Delicious": controller.food_delicious},
                "Food",
                (0.0, 6.0),
            )
    except Exception as e:
        main_log.critical("An unhandled exception occurred: %s", e, exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
