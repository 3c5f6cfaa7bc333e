"""
Supabase connection for Little Journey.

The server keeps children and measurements for every family in one project,
so it connects with the service-role key. Without SUPABASE_URL and
SUPABASE_SERVICE_KEY the server uses its in-memory store instead.
"""

import logging
import os
from typing import Optional

from supabase import create_client, Client

logger = logging.getLogger(__name__)


class SupabaseConfig:
  """Connection settings read from the environment."""

  def __init__(self):
    self.url = os.environ.get("SUPABASE_URL")
    self.service_key = os.environ.get("SUPABASE_SERVICE_KEY")

  @property
  def is_configured(self) -> bool:
    """True when both the project URL and the service key are set."""
    return bool(self.url and self.service_key)

  def validate(self) -> None:
    """Raise ValueError naming the first missing variable."""
    if not self.url:
      raise ValueError("SUPABASE_URL environment variable not set")
    if not self.service_key:
      raise ValueError("SUPABASE_SERVICE_KEY environment variable not set")


class SupabaseClient:
  """
  Table access for the repositories.

  Tests pass any object with a compatible table() in its place.
  """

  def __init__(self, client: Client):
    self._client = client

  def table(self, name: str):
    return self._client.table(name)


_client: Optional[SupabaseClient] = None
_config: Optional[SupabaseConfig] = None


def get_config() -> SupabaseConfig:
  """Get the Supabase configuration (singleton)."""
  global _config
  if _config is None:
    _config = SupabaseConfig()
  return _config


def get_client() -> SupabaseClient:
  """
  Get the shared service-role client (singleton).

  Raises:
    ValueError: if SUPABASE_URL or SUPABASE_SERVICE_KEY is missing
  """
  global _client
  if _client is None:
    config = get_config()
    config.validate()
    _client = SupabaseClient(create_client(config.url, config.service_key))
    logger.info("Connected to Supabase at %s", config.url)
  return _client


def is_configured() -> bool:
  """Check if Supabase is configured without raising errors."""
  return get_config().is_configured


def reset_clients() -> None:
  """Forget the cached config and client so the environment is re-read."""
  global _client, _config
  _client = None
  _config = None
