"""Runtime settings for huewave.

Resolution order (first wins):
  1. Command-line flags (applied by the CLI on top of these settings).
  2. OS environment variables.
  3. A .env file: the --env-file path if given, otherwise the first .env
     found walking up from cwd. The walk stops at a directory holding .git
     (dir or worktree file), so a .env outside the repo is never read.

Keys:
  HUEWAVE_PREFIX   constant-name prefix for the named table (default UBE)
  HUEWAVE_CONFIG   YAML palette config path
  HUEWAVE_OUTPUT   where to write the named colour data file

os.environ is read, never written.
"""

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

_ENV_LINE = re.compile(r'^(?:export\s+)?([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*)$')

PREFIX_KEY = 'HUEWAVE_PREFIX'
CONFIG_KEY = 'HUEWAVE_CONFIG'
OUTPUT_KEY = 'HUEWAVE_OUTPUT'


@dataclass(frozen=True)
class Settings:
    prefix: str | None = None
    config_path: str | None = None
    output_path: str | None = None
    env_path: Path | None = None  # the .env that was read, if any


def find_env_file(start: Path) -> Path | None:
    """Nearest .env at or above start, without crossing a .git boundary."""
    here = start.resolve()
    for directory in (here, *here.parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def read_env_file(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes around values are dropped; # lines skipped."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if line.startswith('#'):
            continue
        m = _ENV_LINE.match(line)
        if not m:
            continue
        value = m.group(2).strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in '"\'':
            value = value[1:-1]
        values[m.group(1)] = value
    return values


def load_settings(env_file: str | None = None, environ: Mapping[str, str] | None = None) -> Settings:
    """Resolve settings from the environment and an optional .env file."""
    env = os.environ if environ is None else environ

    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            path = None
    else:
        path = find_env_file(Path.cwd())

    from_file = read_env_file(path) if path else {}

    def pick(key: str) -> str | None:
        return env.get(key) or from_file.get(key) or None

    return Settings(
        prefix=pick(PREFIX_KEY),
        config_path=pick(CONFIG_KEY),
        output_path=pick(OUTPUT_KEY),
        env_path=path,
    )
