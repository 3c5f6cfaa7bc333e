"""
Supabase-backed storage for children and growth measurements.

Tables: "children" and "growth_measurements". Percentile results are
never stored; they are derived from these rows on read.
"""

import logging
from typing import Optional, Any

from src.db.client import get_client, SupabaseClient
from src.models import ChildProfile, GrowthMeasurement, MeasurementType

logger = logging.getLogger(__name__)


class BaseRepository:
  """Base class for all repositories."""

  table_name: str = ""

  def __init__(self, client: Optional[SupabaseClient] = None):
    """
    Args:
      client: Object providing table(name). Defaults to the shared
        service-role client.
    """
    self._client = client if client is not None else get_client()

  @property
  def table(self):
    """Get the table reference."""
    return self._client.table(self.table_name)

  def _to_dict(self, obj: Any) -> dict:
    """Convert object to dict for storage."""
    if hasattr(obj, "model_dump"):
      return obj.model_dump(mode="json", exclude_none=True)
    elif isinstance(obj, dict):
      return obj
    else:
      raise ValueError(f"Cannot convert {type(obj)} to dict")


class ChildRepository(BaseRepository):
  """Repository for child profiles."""

  table_name = "children"

  def get_by_id(self, child_id: str) -> Optional[ChildProfile]:
    """Get child by ID."""
    response = self.table.select("*").eq("id", child_id).execute()
    if not response.data:
      return None
    return ChildProfile.model_validate(response.data[0])

  def create(self, child: ChildProfile) -> ChildProfile:
    """Create a child profile."""
    response = self.table.insert(self._to_dict(child)).execute()
    logger.info("Created child %s", child.id)
    return ChildProfile.model_validate(response.data[0]) if response.data else child

  def delete(self, child_id: str) -> bool:
    """Delete a child profile."""
    response = self.table.delete().eq("id", child_id).execute()
    return len(response.data) > 0 if response.data else False


class MeasurementRepository(BaseRepository):
  """
  Repository for growth measurements.

  Implements the same add / list_for_child / delete surface as
  InMemoryMeasurementStore so GrowthTracker can use either.
  """

  table_name = "growth_measurements"

  def _to_dict(self, obj: Any) -> dict:
    data = super()._to_dict(obj)
    # Derived from type; not a column
    data.pop("unit", None)
    return data

  def add(self, measurement: GrowthMeasurement) -> GrowthMeasurement:
    """Insert a measurement."""
    response = self.table.insert(self._to_dict(measurement)).execute()
    logger.info("Stored measurement %s for child %s", measurement.id, measurement.child_id)
    if response.data:
      return GrowthMeasurement.model_validate(response.data[0])
    return measurement

  def list_for_child(
    self,
    child_id: str,
    type: Optional[MeasurementType] = None,
  ) -> list[GrowthMeasurement]:
    """Get a child's measurements, newest first."""
    query = self.table.select("*").eq("child_id", child_id)
    if type is not None:
      query = query.eq("type", MeasurementType(type).value)
    response = query.order("date", desc=True).execute()
    return [GrowthMeasurement.model_validate(row) for row in response.data or []]

  def delete(self, measurement_id: str) -> bool:
    """Delete a measurement."""
    response = self.table.delete().eq("id", measurement_id).execute()
    deleted = len(response.data) > 0 if response.data else False
    if deleted:
      logger.info("Deleted measurement %s", measurement_id)
    return deleted
