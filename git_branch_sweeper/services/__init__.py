"""Services for git-branch-sweeper."""

from .candidates import build_candidate_set, collect_exclusions
from .deletion_executor import DeletionExecutor
from .display_service import DisplayService
from .merge_classifier import MergeClassifier
from .ref_inventory import RefInventory
from .staleness_classifier import StalenessClassifier

__all__ = [
    "build_candidate_set",
    "collect_exclusions",
    "DeletionExecutor",
    "DisplayService",
    "MergeClassifier",
    "RefInventory",
    "StalenessClassifier",
]
