"""Arity-indexed result binding builders.

The shape of every generated body depends on how many values the
delegate returns. Each arity has its own builder so it can be tested
against literal descriptors:

    0 results  ->  no binding, plain call
    1 result   ->  `err` for the error type, `res` otherwise
    2 results  ->  `res, err`
    N results  ->  `res0 ... resK`, last one `err` for the error type
"""

from dataclasses import replace
from typing import AbstractSet, Callable, Dict, List, Sequence

from ..constants import CONTEXT_PARAM, ERROR_TYPE
from ..reflector.models import MethodDescriptor


def _bind_none(returns: Sequence[str], error_type: str) -> List[str]:
    return []


def _bind_single(returns: Sequence[str], error_type: str) -> List[str]:
    return ["err"] if returns[0] == error_type else ["res"]


def _bind_pair(returns: Sequence[str], error_type: str) -> List[str]:
    return ["res", "err"]


def _bind_many(returns: Sequence[str], error_type: str) -> List[str]:
    names = [f"res{i}" for i in range(len(returns))]
    if returns[-1] == error_type:
        names[-1] = "err"
    return names


_BINDERS: Dict[int, Callable[[Sequence[str], str], List[str]]] = {
    0: _bind_none,
    1: _bind_single,
    2: _bind_pair,
}


def result_bindings(method: MethodDescriptor, error_type: str = ERROR_TYPE) -> List[str]:
    """Names the delegate's results are bound to, in return order."""
    binder = _BINDERS.get(method.arity, _bind_many)
    return binder(method.returns, error_type)


def delegate_call(method: MethodDescriptor, receiver: str = "m") -> str:
    """Call expression forwarding every argument to the wrapped instance."""
    arguments = ", ".join(p.call_argument for p in method.parameters)
    return f"{receiver}.next.{method.name}({arguments})"


def call_statement(method: MethodDescriptor, bindings: Sequence[str], receiver: str = "m") -> str:
    call = delegate_call(method, receiver)
    if not bindings:
        return call
    return f"{', '.join(bindings)} := {call}"


def return_statement(bindings: Sequence[str]) -> str:
    if not bindings:
        return "return"
    return f"return {', '.join(bindings)}"


def takes_context(method: MethodDescriptor, context_param: str = CONTEXT_PARAM) -> bool:
    """True when the first parameter is the canonical context parameter."""
    return bool(method.parameters) and method.parameters[0].name == context_param


def rename_parameters(method: MethodDescriptor, reserved: AbstractSet[str]) -> MethodDescriptor:
    """Move parameters off names the generated body declares or uses.

    A parameter named like a result binding (``err``) or a body local
    (``span``) is renamed ``<name>Arg``, numbered when that is taken too.
    Parameter names are local to the wrapper, so the interface is still
    satisfied.
    """
    if not any(p.name in reserved for p in method.parameters):
        return method

    taken = set(reserved) | {p.name for p in method.parameters}
    parameters = []
    for param in method.parameters:
        if param.name in reserved:
            candidate = f"{param.name}Arg"
            index = 2
            while candidate in taken:
                candidate = f"{param.name}Arg{index}"
                index += 1
            taken.add(candidate)
            param = replace(param, name=candidate)
        parameters.append(param)
    return replace(method, parameters=tuple(parameters))
