"""Settings for colwidth, read from the environment and an optional .env file.

Precedence (first wins):
  1. Variables already in the OS environment. Never overwritten.
  2. The .env file named by --env-file, when given.
  3. The nearest .env found walking up from cwd. The walk ends at the first
     directory holding .git, so a .env outside the repo is never read.

Recognised variables:
  COLWIDTH_PLATFORM        web | native (unit labels)      default: web
  COLWIDTH_UNIT            unit used by `colwidth format`  default: %
  COLWIDTH_PREVIEW_WIDTH   preview image width in px       default: 800
  COLWIDTH_PREVIEW_HEIGHT  preview image height in px      default: 120
"""

import os
from dataclasses import dataclass
from pathlib import Path

from colwidth.core.units import NATIVE, WEB

DEFAULT_PREVIEW_SIZE = (800, 120)


def find_env_file(start: Path) -> Path | None:
    """Nearest .env at or above start, without crossing a .git boundary."""
    directory = start.resolve()
    while True:
        env_file = directory / '.env'
        if env_file.is_file():
            return env_file
        # .git is a dir in a clone and a file in a worktree
        if (directory / '.git').exists() or directory.parent == directory:
            return None
        directory = directory.parent


def read_env_file(path: Path) -> dict[str, str]:
    """KEY=value pairs from a .env file. Quotes around values are dropped."""
    values: dict[str, str] = {}
    for raw_line in path.read_text(encoding='utf-8').splitlines():
        line = raw_line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        name, _, value = line.partition('=')
        name = name.strip()
        if name:
            values[name] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ where unset. Returns the file used."""
    path = Path(env_file) if env_file else find_env_file(Path.cwd())
    if path is None or not path.is_file():
        return None

    for name, value in read_env_file(path).items():
        os.environ.setdefault(name, value)
    return path


def _int_setting(name: str, default: int) -> int:
    try:
        value = int(os.environ.get(name, default))
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class Settings:
    platform: str = WEB
    unit: str = '%'
    preview_width: int = DEFAULT_PREVIEW_SIZE[0]
    preview_height: int = DEFAULT_PREVIEW_SIZE[1]

    @classmethod
    def from_environ(cls) -> 'Settings':
        platform = os.environ.get('COLWIDTH_PLATFORM', WEB).strip().lower()
        return cls(
            platform=NATIVE if platform == NATIVE else WEB,
            unit=os.environ.get('COLWIDTH_UNIT', '%').strip() or '%',
            preview_width=_int_setting('COLWIDTH_PREVIEW_WIDTH', DEFAULT_PREVIEW_SIZE[0]),
            preview_height=_int_setting('COLWIDTH_PREVIEW_HEIGHT', DEFAULT_PREVIEW_SIZE[1]),
        )
