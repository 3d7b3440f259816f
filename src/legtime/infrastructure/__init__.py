"""Infrastructure layer: adapters over third-party calendar and locale data."""
