from .player import LogPlayer, load_from_file, load_last_file_for_name, load_path
from .recorder import LogRecorder, start_recording

__all__ = [
    "LogPlayer",
    "LogRecorder",
    "load_from_file",
    "load_last_file_for_name",
    "load_path",
    "start_recording",
]
