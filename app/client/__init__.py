from .api import ConfessionsAPI
from .state import (
    ConfessionWall,
    DetailView,
    FeedView,
    FormView,
    InvalidTransition,
    LandingView,
)

__all__ = [
    "ConfessionsAPI",
    "ConfessionWall",
    "DetailView",
    "FeedView",
    "FormView",
    "InvalidTransition",
    "LandingView",
]
