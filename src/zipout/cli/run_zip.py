"""Command-line runner for zipping simulation output.

This module contains the actual runner, separated from argument parsing.

Usage::

    zipout --output-path /data/run01/ --format jld2 --prefix outfile
    zipout my_config.py --order time -v
"""

import argparse
import importlib.util
import json
import logging
from pathlib import Path
from typing import Optional, Dict, Any

from zipout.pipeline.orchestrator import ZipOrchestrator
from zipout.schemas import resolve_config, ParamConfig, UserConfig, CLIConfig

__all__ = ['load_user_config_dict', 'run_zip_output', 'main']

logger = logging.getLogger(__name__)


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from Python file.

    Returns the raw dict before Pydantic validation.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If no CONFIG dict found in file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    spec = importlib.util.spec_from_file_location("config_module", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ValueError(f"No CONFIG dict found in {path}")


def run_zip_output(
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> Optional[Path]:
    """Resolve configuration and zip the simulation output it describes.

    Parameters
    ----------
    user_config_path : str, optional
        Path to user config file (Python file with CONFIG dict).
    cli_args : dict, optional
        CLI overrides. Keys: output_path, output_format, prefix, zip_format,
        archive_name, order, read_strategy, log_level, log_file.
    verbose : bool, optional
        If True, enable DEBUG logging and print the resolved config.

    Returns
    -------
    Path or None
        Archive path, or None when nothing was written.
    """
    param_cfg = ParamConfig()

    user_cfg = None
    if user_config_path is not None:
        user_cfg = UserConfig.model_validate(load_user_config_dict(user_config_path))

    cli_args = dict(cli_args or {})
    if verbose and cli_args.get("log_level") is None:
        cli_args["log_level"] = "DEBUG"
    cli_dict = {k: v for k, v in cli_args.items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()

    config = resolve_config(param_cfg, user_cfg, cli_cfg)

    orchestrator = ZipOrchestrator(config)
    orchestrator._setup_logging()

    if verbose:
        logger.debug("Resolved configuration:\n%s", json.dumps(config.model_dump(), indent=2))

    return orchestrator.zip_output()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Zip per-timestep simulation snapshots into one NetCDF archive"
    )
    parser.add_argument("config", nargs="?", help="Path to user config file (optional)")
    parser.add_argument("--output-path", "--input-dir", dest="output_path",
                        help="Folder holding the snapshot files")
    parser.add_argument("--format", dest="output_format", choices=["mat", "jld2"],
                        help="Snapshot format")
    parser.add_argument("--prefix", help="Snapshot file name prefix")
    parser.add_argument("--zip-format", choices=["nc", "none"], help="Archive format")
    parser.add_argument("--archive", dest="archive_name",
                        help="Archive file name (default: <prefix>.nc)")
    parser.add_argument("--order", choices=["name", "time"], help="Time ordering of files")
    parser.add_argument("--read-strategy", choices=["reopen", "cache"],
                        help="Re-open files per variable, or read each file once")
    parser.add_argument("--log-file", help="Also log to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    cli_args = {
        "output_path": args.output_path,
        "output_format": args.output_format,
        "prefix": args.prefix,
        "zip_format": args.zip_format,
        "archive_name": args.archive_name,
        "order": args.order,
        "read_strategy": args.read_strategy,
        "log_file": args.log_file,
    }
    run_zip_output(args.config, cli_args, verbose=args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
