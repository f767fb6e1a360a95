"""zipout User Configuration.

This is the user-facing configuration file. Modify settings here to point
at a simulation output folder. Advanced settings are in zipout.schemas.param

Usage:
    python scripts/run_zip_output.py scripts/user_config.py
    python scripts/run_zip_output.py scripts/user_config.py --prefix outfile
"""

CONFIG = {
    # ========================================================================
    # SIMULATION OUTPUT
    # ========================================================================
    "OUTPUT_PATH": "./outputs/",   # Folder holding the snapshot files
    "OUTPUT_FORMAT": "jld2",       # "jld2" or "mat"
    "PREFIX": "outfile",           # Snapshot files start with this
    "ZIP_FORMAT": "nc",            # "nc" to zip, "none" to skip
    "ARCHIVE_NAME": None,          # Default: <PREFIX>.nc inside OUTPUT_PATH

    # ========================================================================
    # AGGREGATION
    # ========================================================================
    "ORDER": "name",               # "name" (file name) or "time" (stored t)
    "READ_STRATEGY": "reopen",     # "reopen" (low memory) or "cache" (fewer reads)

    # ========================================================================
    # ARCHIVE
    # ========================================================================
    "COMPRESSION": "zlib",         # "zlib" or "none"
    "COMPLEVEL": 4,

    # ========================================================================
    # LOGGING
    # ========================================================================
    "LOG_LEVEL": "INFO",
    "LOG_FILE": None,
}
