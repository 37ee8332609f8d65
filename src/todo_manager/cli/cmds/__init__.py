from .list_cmds import register as register_lists

__all__ = [
    "register_lists",
]
