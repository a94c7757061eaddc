"""Client-side helpers for the SatyaMatrix API."""

from .analysis import (
    Analysis,
    ReportDraft,
    build_report_draft,
    detect_source_type,
    filter_reports,
    parse_tags,
    simulate_analysis,
)
from .api import ApiError, SatyaApiClient, VoteSubmitter
from .reconciler import VoteReconciler, apply_transition
from .store import InMemoryStore, JsonFileStore, KeyValueStore, LocalVoteState

__all__ = [
    "Analysis",
    "ApiError",
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "LocalVoteState",
    "ReportDraft",
    "SatyaApiClient",
    "VoteReconciler",
    "VoteSubmitter",
    "apply_transition",
    "build_report_draft",
    "detect_source_type",
    "filter_reports",
    "parse_tags",
    "simulate_analysis",
]
