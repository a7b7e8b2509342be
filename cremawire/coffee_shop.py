import argparse
import logging
import sys
from typing import List, Optional

from cremawire.coffee_app import AppSettings, BrewReport, create_apps


class CoffeeShop:
    def __init__(self, settings: AppSettings, variant: str = "both") -> None:
        self.settings = settings
        self.apps = create_apps(variant, settings=self.settings)

    def serve(self, brews: int = 1) -> List[BrewReport]:
        if brews <= 0:
            raise ValueError("brews must be positive")
        reports = []
        for _ in range(brews):
            for app in self.apps:
                reports.append(app.brew())
        return reports


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Brew coffee with a wired heater and pump.")
    parser.add_argument(
        "--variant",
        choices=["plain", "logging", "both"],
        default="both",
        help="Which application variant to brew with.",
    )
    parser.add_argument("--warmup", type=float, default=None, help="Heater warm-up time in seconds.")
    parser.add_argument("--brews", type=int, default=1, help="How many times each variant brews.")
    parser.add_argument("--verbose", action="store_true", help="Echo wiring events to stderr.")
    args = parser.parse_args(argv)

    overrides = {}
    if args.warmup is not None:
        overrides["heater_warmup_seconds"] = args.warmup
    settings = AppSettings(**overrides)

    shop = CoffeeShop(settings, variant=args.variant)
    logger = logging.getLogger(settings.logger_name)
    handler = None
    if args.verbose:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        logger.addHandler(handler)

    try:
        reports = shop.serve(brews=args.brews)
    finally:
        if handler is not None:
            logger.removeHandler(handler)

    for report in reports:
        if not report.pumped:
            print(f"[{report.variant}] heater was not hot, nothing pumped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
