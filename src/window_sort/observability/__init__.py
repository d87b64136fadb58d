from .logging import LogMessage, log_to_dict

__all__ = ["LogMessage", "log_to_dict"]
