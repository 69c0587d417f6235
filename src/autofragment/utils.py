"""Provide general utility functions that would not fit in other modules."""

from collections.abc import Iterable, Iterator, Mapping
from contextlib import suppress
from pathlib import Path
from re import compile as re_compile
from typing import Any

_integer_pattern = re_compile(r"[+-]?\d+")


def import_module_and_submodules(package_name: str) -> None:
    """Import all modules and submodules from a package.

    From https://github.com/allenai/allennlp/blob/master/allennlp/common/util.py.

    Args:
        package_name: Name of the package to fully import.
    """
    from importlib import import_module, reload
    from importlib import invalidate_caches as importlib_invalidate_caches
    from pkgutil import walk_packages
    from sys import modules

    importlib_invalidate_caches()

    if package_name in modules:
        module = modules[package_name]
        reload(module)
    else:
        module = import_module(package_name)
    path = getattr(module, "__path__", [])
    path_string = "" if not path else path[0]

    for module_finder, name, _ in walk_packages(path):
        if (
            path_string
            and hasattr(module_finder, "path")
            and module_finder.path != path_string
        ):
            continue
        subpackage = f"{package_name}.{name}"
        import_module_and_submodules(subpackage)


def parse_int(value: str) -> int | None:
    """Parse an optionally signed decimal integer.

    Args:
        value: String to parse. Surrounding whitespace is tolerated.

    Returns:
        The parsed integer, or None if `value` is not an integer.
    """
    stripped = value.strip()
    if _integer_pattern.fullmatch(stripped) is None:
        return None
    return int(stripped)


def dirs_hierarchy(user_config_dir: Path, current_dir: Path) -> Iterator[Path]:
    yield user_config_dir
    if current_dir.resolve() != user_config_dir.resolve():
        yield current_dir


def merge_dicts(a: Mapping[str, Any], b: Mapping[str, Any]) -> dict[str, Any]:
    """Merge `b` into `a`, recursively merging mappings found under the same key.

    Args:
        a: Base mapping.
        b: Mapping whose values win over the ones of `a`.

    Returns:
        A new merged dictionary. Neither argument is modified.
    """
    merged = dict(a)
    for key, value in b.items():
        previous = merged.get(key)
        if isinstance(previous, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_dicts(previous, value)
        else:
            merged[key] = value
    return merged


def load_yaml(path: Path) -> Any:
    from yaml import safe_load

    return safe_load(path.read_text(encoding="utf8"))


def load_all_yamls(paths: Iterable[Path]) -> Iterator[Any]:
    for path in paths:
        with suppress(FileNotFoundError):
            yield load_yaml(path)
