import logging
from pathlib import Path
from typing import Optional, Any, Callable

import yaml

_config_path: Optional[Path] = None
_config_yml: dict = {}

_log = logging.getLogger("config_provider")


def load_file(path: str | Path) -> None:
    if type(path) is not Path:
        path = Path(path)
    global _config_yml, _config_path
    _config_path = path
    with _config_path.open() as f:
        _config_yml = yaml.load(f, Loader=yaml.SafeLoader) or {}
    _log.debug(f"Loaded config from {_config_path}")


def _load_string(yml_str: str) -> None:
    global _config_yml
    _config_yml = yaml.load(yml_str, Loader=yaml.SafeLoader) or {}


def get_value(key_path: list[str], default: Optional[Any] = None, cast_fn: Callable[[Any], Any] = str) -> Any:
    """
    Retrieves scalar values from the loaded yaml.  The optional default value is returned
    if the key is not found.  If the query or yaml schema cause traversal though a scalar value,
    an error is thrown as this indicates not a missing key, but a misconfiguration.
    :param key_path: List[str] of path elements i.e. ["path","to","key"]
    :param default: value that should be returned if key not found.  It is returned as is, `cast_fn` is not applied.
    :param cast_fn: transform the found scalar into a desired type
    :return: found value passed through `cast_fn`, or default
    :raise: ValueError if provided path would cause traversal through a scalar value, if the found value
    cannot be cast or if the path does not exist and no default was provided.
    """
    if type(key_path) is not list or not key_path:
        raise ValueError("key_path should be a non-empty list of path elements.")

    val = _config_yml
    for i in range(0, len(key_path) - 1):
        if val is None:
            break
        if type(val) is not dict:
            raise ValueError("Yaml schema contained scalar/list value where a dict was expected. ")
        val = val.get(key_path[i])

    if val is not None and type(val) is not dict:
        raise ValueError("Yaml schema contained scalar/list value where a dict was expected. ")
    found_val = val.get(key_path[-1]) if val is not None else None
    if found_val is None:
        if default is not None:
            _log.info(f"Unable to find value for key: {'.'.join(key_path)}, using default value {default}")
            return default
        raise ValueError(f"Unable to provide a value.  Key not found: {'.'.join(key_path)}")

    if type(found_val) in {int, float, str, bool}:
        try:
            return cast_fn(found_val)
        except Exception as e:
            raise ValueError(f"Unable to cast key: {'.'.join(key_path)}", e)
    raise ValueError("Yaml schema contained dict or list where a scalar was expected. ")


def key_exists(key_path: list[str]) -> bool:
    """
    Query if a key exists.
    :param key_path: List[str] of path elements i.e. ["path","to","key"]
    :return:
    """
    if type(key_path) is not list:
        raise ValueError("key_path should be a list of path elements.")

    cur_val = _config_yml
    for element in key_path:
        if type(cur_val) is not dict:
            return False
        cur_val = cur_val.get(element)
        if cur_val is None:
            return False
    return True


class CastFn:
    """
    Cast functions intended to be used with `get_value`
    """

    _TRUE = {"true", "yes", "on", "1"}
    _FALSE = {"false", "no", "off", "0"}

    @staticmethod
    def to_int(val: Any) -> int:
        return int(val)

    @staticmethod
    def to_float(val: Any) -> float:
        return float(val)

    @staticmethod
    def to_str(val: Any) -> str:
        return str(val)

    @staticmethod
    def to_bool(val: Any) -> bool:
        if type(val) is bool:
            return val
        normalized = str(val).strip().lower()
        if normalized in CastFn._TRUE:
            return True
        if normalized in CastFn._FALSE:
            return False
        raise ValueError(f"Not a boolean: {val}")

    @staticmethod
    def by_name(name: str) -> Callable[[Any], Any]:
        """
        Look up a cast function by the type it produces i.e. "int"
        :param name: one of int, float, str, bool
        :return:
        """
        match name:
            case "int":
                return CastFn.to_int
            case "float":
                return CastFn.to_float
            case "str":
                return CastFn.to_str
            case "bool":
                return CastFn.to_bool
            case _:
                raise ValueError(f"No cast function for type: {name}")
