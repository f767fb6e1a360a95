"""Aggregation stage contract.

Enforces the guarantee that every aggregated field is a full
(Nx, Ny, Nf) stack.
"""

from zipout.contracts.base import require


def assert_fields(fields: dict, nx: int, ny: int, nf: int) -> None:
    """Enforce aggregation contract.

    Called after VariableAggregator.aggregate(). We do not check the values,
    only that each accepted field has the archive's full shape.

    Raises
    ------
    ContractViolation
        If a field is not shaped (nx, ny, nf)
    """
    require(
        isinstance(fields, dict),
        f"Aggregation contract violated: output is {type(fields)}, expected dict"
    )
    for name, data in fields.items():
        require(
            data.shape == (nx, ny, nf),
            f"Aggregation contract violated: '{name}' has shape {data.shape}, "
            f"expected {(nx, ny, nf)}"
        )
