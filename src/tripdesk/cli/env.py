"""``--env-file`` support for the ``tripdesk`` CLI.

Settings such as ``TRIPDESK_API_URL`` or ``TRIPDESK_PORT`` are read from the
environment at call time. Passing ``--env-file path`` (anywhere on the command
line, repeatable) loads ``KEY=value`` lines into ``os.environ`` before the
subcommand runs.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
import os
import shlex

_FLAG = "--env-file"


def split_env_file_args(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Return ``(env_files, remaining_argv)``.

    Accepts ``--env-file path`` and ``--env-file=path``.
    """

    env_files: list[str] = []
    remaining: list[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token == _FLAG:
            value = next(tokens, None)
            if value is None:
                raise SystemExit(f"{_FLAG} requires a file path")
            env_files.append(value)
        elif token.startswith(_FLAG + "="):
            env_files.append(token.split("=", 1)[1])
        else:
            remaining.append(token)
    return env_files, remaining


def parse_env_text(text: str) -> dict[str, str]:
    """Parse ``KEY=value`` lines; ``export`` prefixes, quotes and ``#`` comments are honored."""

    parsed: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()

        key, raw_value = line.split("=", 1)
        key = key.strip()
        if not key:
            continue

        lexer = shlex.shlex(raw_value.strip(), posix=True)
        lexer.whitespace_split = True
        lexer.commenters = "#"
        try:
            parsed[key] = " ".join(lexer)
        except ValueError:
            parsed[key] = raw_value.strip()
    return parsed


def load_env_files(paths: Sequence[str | Path], *, override: bool = True) -> dict[str, str]:
    """Load env files in order into ``os.environ``; later files win."""

    merged: dict[str, str] = {}
    for path in paths:
        resolved = Path(path).expanduser()
        if not resolved.exists():
            raise SystemExit(f"{_FLAG} does not exist: {resolved}")
        merged.update(parse_env_text(resolved.read_text(encoding="utf-8")))

    for key, value in merged.items():
        if override or key not in os.environ:
            os.environ[key] = value
    return merged
