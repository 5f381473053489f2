import os
import warnings


def _env_flag(name, default="0"):
    value = os.environ.get(name, default)
    try:
        return bool(int(value))
    except ValueError:
        warnings.warn(f"Invalid value for {name}: {value!r}. Using {default}.", UserWarning, stacklevel=2)
        return bool(int(default))


def _env_float(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        warnings.warn(f"Invalid value for {name}: {value!r}. Using {default}.", UserWarning, stacklevel=2)
        return default


CHECK_BOUNDS = _env_flag("SPARSEMAT_CHECK_BOUNDS")
AUTO_DENSIFY = _env_flag("SPARSEMAT_AUTO_DENSIFY")
WARN_ON_TOO_DENSE = _env_flag("SPARSEMAT_WARN_ON_TOO_DENSE")
DENSITY_WARN_THRESHOLD = _env_float("SPARSEMAT_DENSITY_WARN_THRESHOLD", 0.5)
