"""
Core protocols for PyLSoE.

We use Protocol (structural typing) rather than ABC (nominal typing) so
that any object with the right shape can act as a backend.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pylsoe.core.result import Result

P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a domain-specific design and produce
    a domain-specific parameter payload wrapped in a Result.

    Backends are stateless. All configuration is passed via the design
    or at construction time.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_gauss_jordan'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Raises:
            NumericalError: If an internal numerical invariant fails
            ValidationError: If design is invalid for this backend
        """
        ...
