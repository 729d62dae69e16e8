"""Deprecated spellings of the string search API."""

from typing import Any, Callable

from packaging import version
from pandas import __version__ as pd_version
from pandas._typing import F
from pandas.util._decorators import deprecate as pd_deprecate
from pandas.util._decorators import deprecate_kwarg as pd_deprecate_kwarg

PANDAS_ABOVE_3 = version.parse(pd_version) >= version.parse("3.0.0")

# pandas 3 no longer warns with FutureWarning by default and only then accepts `klass` everywhere.
_WARNING_KWARGS: dict[str, Any] = {"klass": FutureWarning} if PANDAS_ABOVE_3 else {}


def deprecated_search_alias(
    name: str, alternative: Callable[..., Any], version: str
) -> Callable[..., Any]:
    """
    Create a deprecated search function calling its replacement.

    Args:
        name (str): Legacy name of the search function, e.g. `tiles_for_search`.
        alternative (Callable[..., Any]): Search function replacing it.
            Its docstring must start with an empty line followed by a one-line summary.
        version (str): Version in which the name has been deprecated.

    Returns:
        Callable[..., Any]: Wrapper emitting a `FutureWarning` on every call.
    """
    msg = f"{name} is deprecated, use {alternative.__name__} instead."
    return pd_deprecate(  # type: ignore[no-any-return]
        name=name, alternative=alternative, version=version, msg=msg, **_WARNING_KWARGS
    )


def accepts_distance_keyword(func: F) -> F:
    """Accept `distance` as the legacy spelling of the `radius` argument."""
    decorator = pd_deprecate_kwarg(
        old_arg_name="distance", new_arg_name="radius", **_WARNING_KWARGS
    )
    return decorator(func)  # type: ignore[no-any-return]
