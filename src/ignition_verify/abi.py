"""Constructor argument encoding for ignition-verify library."""

from typing import Any, Dict, List, Optional, Sequence

from eth_abi import encode
from eth_utils import to_bytes

from .types import Artifact


def _find_constructor(abi: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    for item in abi:
        if item.get("type") == "constructor":
            return item
    return None


def abi_type_string(param: Dict[str, Any]) -> str:
    """
    Build the canonical type string of an ABI parameter.

    Tuples are expanded from their components, e.g. "(address,uint256)[]".
    """
    param_type = param["type"]
    if not param_type.startswith("tuple"):
        return param_type

    components = param.get("components")
    if components is None:
        raise ValueError(f"ABI parameter of type {param_type} has no components")

    inner = ",".join(abi_type_string(c) for c in components)
    return f"({inner}){param_type[len('tuple'):]}"


def _normalize_value(param_type: str, components: Optional[List[Dict[str, Any]]], value: Any) -> Any:
    """Coerce a journaled argument into the Python type eth-abi expects."""
    if param_type.endswith("]"):
        element_type = param_type[: param_type.rindex("[")]
        return [_normalize_value(element_type, components, v) for v in value]

    if param_type == "tuple":
        if components is None:
            raise ValueError(f"ABI parameter of type {param_type} has no components")
        # Structs are journaled either positionally or by field name
        if isinstance(value, dict):
            value = [value[c["name"]] for c in components]
        return tuple(
            _normalize_value(c["type"], c.get("components"), v)
            for c, v in zip(components, value)
        )

    if param_type.startswith("bytes") and isinstance(value, str):
        return to_bytes(hexstr=value)

    if param_type.startswith(("uint", "int")) and isinstance(value, str):
        return int(value, 0) if value.startswith(("0x", "0X")) else int(value)

    return value


def encode_deployment_arguments(artifact: Artifact, args: Sequence[Any]) -> str:
    """
    ABI-encode constructor arguments for an artifact.

    Args:
        artifact: Artifact whose ABI declares the constructor
        args: Constructor argument values, in declaration order

    Returns:
        Encoded arguments as lowercase hex without '0x' prefix.
        Empty string if the contract has no constructor.

    Raises:
        ValueError: If the number of arguments doesn't match the constructor
    """
    constructor = _find_constructor(artifact.abi)
    inputs = constructor.get("inputs", []) if constructor is not None else []

    if len(inputs) != len(args):
        raise ValueError(
            f"Constructor of {artifact.contract_name} takes {len(inputs)} arguments, "
            f"got {len(args)}"
        )

    if not inputs:
        return ""

    types = [abi_type_string(param) for param in inputs]
    values = [
        _normalize_value(param["type"], param.get("components"), value)
        for param, value in zip(inputs, args)
    ]

    return encode(types, values).hex()
