"""Version 1 of the Blood Bank API."""
