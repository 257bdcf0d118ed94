from .task import Priority, Task, UTCDateTime, as_utc, utc_now

# Export all models for easy importing
__all__ = ["Priority", "Task", "UTCDateTime", "as_utc", "utc_now"]
