"""Services for scheduling logic."""

from .constraints import can_assign_worker, check_eligibility, eligible_workers
from .restrictions import allow_list_owners, merge_restrictions, rest_day_exclusions
from .scoring import calculate_worker_score
from .timeplan import parse_shift_hours, rest_hours, shifts_overlap

__all__ = [
    "can_assign_worker",
    "check_eligibility",
    "eligible_workers",
    "allow_list_owners",
    "merge_restrictions",
    "rest_day_exclusions",
    "calculate_worker_score",
    "parse_shift_hours",
    "rest_hours",
    "shifts_overlap",
]
