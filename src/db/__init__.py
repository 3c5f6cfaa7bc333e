"""
Supabase persistence for Little Journey.
"""

from src.db.client import get_client, is_configured, reset_clients, SupabaseClient
from src.db.repositories import (
  ChildRepository,
  MeasurementRepository,
)

__all__ = [
  "get_client",
  "is_configured",
  "reset_clients",
  "SupabaseClient",
  "ChildRepository",
  "MeasurementRepository",
]
