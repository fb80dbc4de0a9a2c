from .scoring import (
    compute_icp_score,
    icp_input_from_calculator,
    team_size_bucket,
)

__all__ = [
    "compute_icp_score",
    "icp_input_from_calculator",
    "team_size_bucket",
]
