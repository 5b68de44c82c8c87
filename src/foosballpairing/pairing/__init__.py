from foosballpairing.pairing.teammate_pairing import (
    assign_roles,
    build_teammate_costs,
    create_next_match,
)

__all__ = [
    "create_next_match",
    "build_teammate_costs",
    "assign_roles",
]
