class TelemetryError(Exception):
    pass

class ConfigError(TelemetryError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid telemetry config {path}: {reason}")
