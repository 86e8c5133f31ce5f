"""Storage module."""
from climate_intel.storage.store import InMemoryStore, JsonFileStore, PersistenceStore, create_store
