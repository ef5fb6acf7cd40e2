from .command_history import record_command

__all__ = ["record_command"]
