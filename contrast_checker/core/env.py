"""Environment configuration for contrast-tool.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  CONTRAST_BACKGROUND   default background colour (else ffffff)
  CONTRAST_FOREGROUND   default foreground colour (else 000000)
  CONTRAST_MODE         default notation when no mode flag is given: hex, rgb or hsl
"""

import os
from collections.abc import Mapping
from pathlib import Path

ENV_BACKGROUND = 'CONTRAST_BACKGROUND'
ENV_FOREGROUND = 'CONTRAST_FOREGROUND'
ENV_MODE = 'CONTRAST_MODE'


def _find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, without crossing a .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Read KEY=value lines; quotes around values are dropped, # lines ignored."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env entries into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def colour_defaults(environ: Mapping[str, str] | None = None) -> dict[str, str | None]:
    """Background, foreground and mode defaults taken from the environment.

    Empty values count as unset.
    """
    env = os.environ if environ is None else environ
    return {
        'background': env.get(ENV_BACKGROUND) or None,
        'foreground': env.get(ENV_FOREGROUND) or None,
        'mode': (env.get(ENV_MODE) or '').strip().lower() or None,
    }
