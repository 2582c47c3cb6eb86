from .notifier import Notifier

__all__ = ["Notifier"]
