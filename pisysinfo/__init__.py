"""System telemetry on a PCD8544 (Nokia 5110) LCD."""
