"""Example: monthly payroll through the service layer (no Flask).

Usage: python examples/example_usage.py 2025 6
"""

import importlib
import sys

from config import get_settings_module

from src.timepay.timepay.container import build_container


def main():
    year, month = int(sys.argv[1]), int(sys.argv[2])
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, site_config=settings.SITE_CONFIG)
    for line in container.payroll_service.build_monthly_report(year, month):
        print(line.to_dict())


if __name__ == "__main__":
    main()
