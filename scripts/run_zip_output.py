#!/usr/bin/env python3
"""Zip simulation snapshot output into a NetCDF archive.

Usage:
    python scripts/run_zip_output.py scripts/user_config.py
    python scripts/run_zip_output.py scripts/user_config.py --order time
    python scripts/run_zip_output.py --output-path /data/run01/ --format mat --prefix outfile

Note: User config in scripts/user_config.py, expert defaults in zipout.schemas.param
"""

from zipout.cli.run_zip import main


if __name__ == "__main__":
    raise SystemExit(main())
