from .created_counter import CreatedCounterProtocol

__all__ = ["CreatedCounterProtocol"]
