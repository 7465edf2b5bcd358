"""Runtime services (telemetry) shared by every layer of the editor."""
