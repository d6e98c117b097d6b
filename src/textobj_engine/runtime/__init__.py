"""Runtime services: telemetry and engine settings."""
