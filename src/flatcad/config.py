"""Tolerance and rendering settings for flatCAD.

The tolerance is a module-level setting, in the same spirit as the
``epsilon`` constant of a purely functional geometry library, except
that it can be changed at run time and restored with the
``tolerance()`` context manager.  Settings may also be loaded from a
small YAML file: ::

    tolerance: 1.0e-6
    svg:
      stroke: black
      fill: lightcyan

"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator

logger = logging.getLogger(__name__)

DP_TOL = 0.000001

SVG_DEFAULTS: Dict[str, Any] = {
    'stroke': 'black',
    'strokeWidth': 1,
    'fill': 'lightcyan',
    'fillRule': 'evenodd',
    'fillOpacity': 1.0,
}


def getTolerance() -> float:
    return DP_TOL


def setTolerance(tol: float) -> float:
    """Set the comparison tolerance, return the previous value."""
    global DP_TOL
    if not isinstance(tol, (int, float)) or isinstance(tol, bool) or tol <= 0:
        raise ValueError(f'bad tolerance value: {tol!r}')
    previous = DP_TOL
    DP_TOL = float(tol)
    return previous


@contextmanager
def tolerance(tol: float) -> Iterator[float]:
    """Temporarily use ``tol`` as the comparison tolerance."""
    previous = setTolerance(tol)
    try:
        yield tol
    finally:
        setTolerance(previous)


def svg_attributes(**attrs) -> Dict[str, Any]:
    """Merge caller attributes over ``SVG_DEFAULTS``.  ``None`` and empty
    values fall back to the default."""
    merged = dict(SVG_DEFAULTS)
    for key, value in attrs.items():
        if value is None or value == '':
            continue
        merged[key] = value
    return merged


def _apply(data: Dict[str, Any], source: str) -> None:
    if 'tolerance' in data:
        try:
            setTolerance(data['tolerance'])
        except ValueError as exc:
            raise ValueError(f'{source}: {exc}') from exc

    svg = data.get('svg', {}) or {}
    if not isinstance(svg, dict):
        raise ValueError(f'{source}: svg settings must be a mapping')
    unknown = sorted(set(svg) - set(SVG_DEFAULTS))
    if unknown:
        raise ValueError(f'{source}: unknown svg settings: {", ".join(unknown)}')
    SVG_DEFAULTS.update(svg)


def load_config(path: Path | str) -> Dict[str, Any]:
    """Load a YAML settings file, apply it and return the parsed mapping."""

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f'flatcad config not found: {config_path}')
    import yaml

    with config_path.open('r', encoding='utf-8') as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f'flatcad config must be a mapping, got {type(data)!r}')

    _apply(data, str(config_path))
    logger.debug('loaded settings from %s: tolerance=%g', config_path, DP_TOL)
    return data


__all__ = [
    'DP_TOL',
    'SVG_DEFAULTS',
    'getTolerance',
    'setTolerance',
    'tolerance',
    'svg_attributes',
    'load_config',
]
