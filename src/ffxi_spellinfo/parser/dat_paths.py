"""Locate the spell/ability info DAT for command-line tools.

Resolution order: an explicit path, then the FFXI_SPELLINFO_DAT environment
variable. There is no built-in default because the ROM folder holding the
file differs between client installs.
"""

import os
from collections.abc import Mapping
from pathlib import Path


DAT_ENV_VAR = "FFXI_SPELLINFO_DAT"


def resolve_dat_for_cli(
    explicit_path: Path | None,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Return the DAT path to decode.

    Raises:
        FileNotFoundError: If no path is configured or it does not exist.
    """
    env = os.environ if environ is None else environ
    if explicit_path is not None:
        path = explicit_path
    elif env.get(DAT_ENV_VAR):
        path = Path(env[DAT_ENV_VAR])
    else:
        raise FileNotFoundError(
            f"No DAT file given. Pass --dat or set {DAT_ENV_VAR}."
        )
    if not path.is_file():
        raise FileNotFoundError(f"DAT file not found: {path}")
    return path
