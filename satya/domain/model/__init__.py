"""Domain models for SatyaMatrix."""

from satya.domain.model.report import Report
from satya.domain.model.vote import Vote, VoteTally

__all__ = [
    "Report",
    "Vote",
    "VoteTally",
]
