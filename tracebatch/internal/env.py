import os
import typing as t


def get_config(
    envs: t.Union[str, t.List[str]],
    default: t.Any = None,
    modifier: t.Optional[t.Callable[[t.Any], t.Any]] = None,
    source: t.Optional[t.Mapping[str, str]] = None,
) -> t.Any:
    """Retrieve a configuration value from the first variable in ``envs`` that is set.

    ``source`` defaults to ``os.environ``. The raw string is passed through
    ``modifier`` when one is given; the default is returned untouched.
    """
    if isinstance(envs, str):
        envs = [envs]

    if source is None:
        source = os.environ

    for env in envs:
        if env in source:
            val = source[env]
            if modifier:
                val = modifier(val)
            return val

    return default
