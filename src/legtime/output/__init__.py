"""Output layer: rendering ServiceResult for humans or machines."""
