"""
pyWGS84.settings - Process-wide configuration

Zero-config defaults, overridable from the environment or at runtime.

Environment variables:
    PYWGS84_BOUNDS_WARNINGS: emit TransformWarning from safe transforms
    PYWGS84_GEODETIC_METHOD: default method for to_geodetic
    PYWGS84_MAX_ITERATIONS: iteration cap for to_geodetic (1-10)

Copyright (c) 2024-2026 tkykszk
This software is licensed under the MIT License.
"""

import os
import threading
import warnings
from contextlib import contextmanager

__all__ = [
    # Context managers
    'bounds_warnings_disabled',
    'bounds_warnings_enabled',
    # Enable/disable
    'disable_bounds_warnings',
    'enable_bounds_warnings',
    'is_bounds_warnings_enabled',
    # Geodetic conversion
    'get_geodetic_method',
    'get_max_iterations',
    'set_geodetic_method',
    'set_max_iterations',
    # Status
    'get_settings',
    'show_settings',
]

GEODETIC_METHODS = ('bowring', 'iterative')
DEFAULT_GEODETIC_METHOD = 'bowring'
DEFAULT_MAX_ITERATIONS = 5
# hard ceiling, the geodetic inverse must always terminate quickly
MAX_ITERATIONS_LIMIT = 10


# =============================================================================
# Global State
# =============================================================================

class _SettingsState:
    """Thread-safe settings manager."""

    def __init__(self):
        self._lock = threading.Lock()
        self._bounds_warnings = False
        self._geodetic_method = DEFAULT_GEODETIC_METHOD
        self._max_iterations = DEFAULT_MAX_ITERATIONS

        # Read environment variables
        self._init_from_env()

    def _init_from_env(self):
        """Initialize state from environment variables."""
        # PYWGS84_BOUNDS_WARNINGS
        enabled = os.environ.get('PYWGS84_BOUNDS_WARNINGS', '').lower()
        if enabled in ('1', 'true', 'yes'):
            self._bounds_warnings = True

        # PYWGS84_GEODETIC_METHOD
        method = os.environ.get('PYWGS84_GEODETIC_METHOD', '').strip().lower()
        if method:
            try:
                self._geodetic_method = _validate_method(method)
            except ValueError as e:
                warnings.warn(
                    f"Ignoring PYWGS84_GEODETIC_METHOD: {e}. "
                    f"Using '{DEFAULT_GEODETIC_METHOD}'.",
                    RuntimeWarning,
                    stacklevel=2
                )

        # PYWGS84_MAX_ITERATIONS
        iterations = os.environ.get('PYWGS84_MAX_ITERATIONS', '').strip()
        if iterations:
            try:
                self._max_iterations = _validate_iterations(int(iterations))
            except ValueError as e:
                warnings.warn(
                    f"Ignoring PYWGS84_MAX_ITERATIONS={iterations!r}: {e}. "
                    f"Using {DEFAULT_MAX_ITERATIONS}.",
                    RuntimeWarning,
                    stacklevel=2
                )

    @property
    def bounds_warnings(self) -> bool:
        with self._lock:
            return self._bounds_warnings

    @bounds_warnings.setter
    def bounds_warnings(self, value: bool):
        with self._lock:
            self._bounds_warnings = bool(value)

    @property
    def geodetic_method(self) -> str:
        with self._lock:
            return self._geodetic_method

    @geodetic_method.setter
    def geodetic_method(self, value: str):
        value = _validate_method(value)
        with self._lock:
            self._geodetic_method = value

    @property
    def max_iterations(self) -> int:
        with self._lock:
            return self._max_iterations

    @max_iterations.setter
    def max_iterations(self, value: int):
        value = _validate_iterations(value)
        with self._lock:
            self._max_iterations = value


def _validate_method(method: str) -> str:
    method = str(method).lower()
    if method not in GEODETIC_METHODS:
        raise ValueError(
            f"Unknown geodetic method: {method}. "
            f"Supported: {list(GEODETIC_METHODS)}"
        )
    return method


def _validate_iterations(value: int) -> int:
    if isinstance(value, bool) or int(value) != value:
        raise ValueError(f"max_iterations must be an integer, got {value!r}")
    value = int(value)
    if not 1 <= value <= MAX_ITERATIONS_LIMIT:
        raise ValueError(
            f"max_iterations must be between 1 and {MAX_ITERATIONS_LIMIT}"
        )
    return value


# Global state instance
_state = _SettingsState()


# =============================================================================
# Bounds Warnings
# =============================================================================

def enable_bounds_warnings() -> None:
    """Emit a TransformWarning whenever a safe transform flags an error."""
    _state.bounds_warnings = True


def disable_bounds_warnings() -> None:
    """Stop emitting warnings from safe transforms."""
    _state.bounds_warnings = False


def is_bounds_warnings_enabled() -> bool:
    """Check if safe transforms emit warnings.

    Returns
    -------
    bool
        True if warnings are enabled
    """
    return _state.bounds_warnings


@contextmanager
def bounds_warnings_enabled():
    """Context manager to temporarily enable bounds warnings.

    Example
    -------
    >>> with bounds_warnings_enabled():
    ...     result = lonlat().safe_to(utm(32, True))(200.0, 50.0, 0.0)
    """
    prev_state = _state.bounds_warnings
    _state.bounds_warnings = True
    try:
        yield
    finally:
        _state.bounds_warnings = prev_state


@contextmanager
def bounds_warnings_disabled():
    """Context manager to temporarily disable bounds warnings."""
    prev_state = _state.bounds_warnings
    _state.bounds_warnings = False
    try:
        yield
    finally:
        _state.bounds_warnings = prev_state


# =============================================================================
# Geodetic Conversion
# =============================================================================

def set_geodetic_method(method: str) -> None:
    """Set the default cartesian to geodetic conversion method.

    Parameters
    ----------
    method : str
        'bowring' or 'iterative'
    """
    _state.geodetic_method = method


def get_geodetic_method() -> str:
    """Get the default cartesian to geodetic conversion method."""
    return _state.geodetic_method


def set_max_iterations(value: int) -> None:
    """Set the iteration cap used by to_geodetic.

    Parameters
    ----------
    value : int
        Number of latitude refinements, between 1 and 10
    """
    _state.max_iterations = value


def get_max_iterations() -> int:
    """Get the iteration cap used by to_geodetic."""
    return _state.max_iterations


# =============================================================================
# Status Functions
# =============================================================================

def get_settings() -> dict:
    """Get the current settings.

    Returns
    -------
    dict
        Current values keyed by setting name
    """
    return {
        'bounds_warnings': _state.bounds_warnings,
        'geodetic_method': _state.geodetic_method,
        'max_iterations': _state.max_iterations,
    }


def show_settings() -> None:
    """Print settings to stdout."""
    for key, value in get_settings().items():
        print(f"{key:<20} {value}")
