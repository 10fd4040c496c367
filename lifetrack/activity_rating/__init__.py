"""Daily activity rating.

This package contains:
- the scoring tables (mappings)
- a small, pure engine turning one day of activities into points and a rating
- a service that loads a user's activities for a day and runs the engine
- response schemas for the rating endpoints
"""

from .engine import ActivityFacts, Rating, RatingResult, compute_rating
