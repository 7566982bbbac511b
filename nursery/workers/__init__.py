from nursery.workers.lifecycle_ticker import LifecycleTicker

__all__ = ["LifecycleTicker"]
