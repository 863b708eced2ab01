from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from blens_core.codecs import CODEC_TABLE, Codec, lookup
from blens_core.protocol import DEFAULT_CODECS, DEFAULT_WIDTH, WIDTH_MULTIPLE


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class RunConfig:
    codecs: tuple[str, ...]
    width: int = DEFAULT_WIDTH
    max_rows: int = 0
    source: Path | None = None

    def instantiate(self) -> list[Codec]:
        """Codec instances for one run, each with its own carry."""
        return [lookup(name) for name in self.codecs]


def build_config(
    codecs: Iterable[str] = (),
    width: int = DEFAULT_WIDTH,
    max_rows: int = 0,
    source: str | Path | None = None,
) -> RunConfig:
    """Validate raw settings into a RunConfig.

    No codec selected means the default subset.
    """
    names = tuple(codecs) or DEFAULT_CODECS

    unknown = [n for n in names if n not in CODEC_TABLE]
    if unknown:
        raise ConfigError(f"unknown codec(s): {', '.join(unknown)}")
    if len(set(names)) != len(names):
        raise ConfigError(f"codec listed more than once: {', '.join(names)}")

    if width <= 0 or width % WIDTH_MULTIPLE != 0:
        raise ConfigError(f"width must be a positive multiple of {WIDTH_MULTIPLE}, got {width}")
    if max_rows < 0:
        raise ConfigError(f"row count must not be negative, got {max_rows}")

    if source is None or str(source) == "-":
        path = None
    else:
        path = Path(source)

    return RunConfig(codecs=names, width=width, max_rows=max_rows, source=path)
