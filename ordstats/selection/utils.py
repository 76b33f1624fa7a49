from typing import Callable, NamedTuple

import numba as nb


def _python(func: Callable) -> Callable:
    return func


class Compilers(NamedTuple):
    inline: Callable
    kernel: Callable


def get_compilers(jit: bool) -> Compilers:
    """
    Return the decorators used to build the selection kernels.

    The kernels are closures over the comparator's ``less``, so numba can
    compile the comparison inline, without function call overhead. With
    ``jit=False`` the very same closures are returned as plain Python
    functions: slower, but they accept any element type that supports ``<``.
    """
    if jit:
        return Compilers(inline=nb.njit(inline="always"), kernel=nb.njit)
    return Compilers(inline=_python, kernel=_python)
