"""Building blocks for safety-island longitudinal control: PID, smooth stop, filtering, rate limiting, trajectory pitch and message types."""

__version__ = "0.1.0"