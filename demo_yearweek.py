#!/usr/bin/env python3
"""
Demo: ISO-8601 vs MySQL mode-0 year-weeks around a year boundary.

Also shows the Python and MySQL template renderings for every field.
"""

import argparse
from datetime import timedelta

from yearweek.dates import parse_date
from yearweek.engine import iso_year_week_pair, mysql_year_week, mysql_year_week_pair
from yearweek.model import TemporalField
from yearweek.templates import mysql_templates, python_templates


def main():
    parser = argparse.ArgumentParser(description="Compare ISO and MySQL mode-0 year-weeks")
    parser.add_argument("start", nargs="?", default="2014-12-26", help="First date (YYYY-MM-DD)")
    parser.add_argument("days", nargs="?", type=int, default=12, help="Number of days to show")
    parser.add_argument("--column", default="created_at", help="Column name for template rendering")
    args = parser.parse_args()

    start = parse_date(args.start)

    print("=" * 80)
    print("YEAR-WEEK DEMO")
    print("=" * 80)
    print(f"{'date':<12}{'dow':<6}{'iso':>10}{'mode 0':>10}{'legacy int':>12}{'padded':>10}")
    print("-" * 80)

    for offset in range(args.days):
        d = start + timedelta(days=offset)
        mode0 = mysql_year_week_pair(d)
        print(
            f"{d.isoformat():<12}{d.strftime('%a'):<6}"
            f"{iso_year_week_pair(d).label():>10}{mode0.label():>10}"
            f"{mysql_year_week(d):>12}{mode0.as_int():>10}"
        )

    print("\n" + "=" * 80)
    print(f"TEMPLATES FOR '{args.column}'")
    print("=" * 80)

    py, sql = python_templates(), mysql_templates()
    for temporal_field in TemporalField:
        print(f"{temporal_field.value:<18}{py.render(temporal_field, args.column):<60}")
        print(f"{'':<18}{sql.render(temporal_field, args.column)}")


if __name__ == "__main__":
    main()
