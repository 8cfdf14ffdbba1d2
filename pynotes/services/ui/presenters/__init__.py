from .command_dispatcher import CommandDispatcher, INotesView, window_title

__all__ = ["CommandDispatcher", "INotesView", "window_title"]
