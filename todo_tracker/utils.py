import os
import sys


def get_base_path() -> str:
    """
    Return the directory the application reads and writes its files from.

    Returns:
        str: the executable's directory for frozen builds, otherwise the project root
    """
    if getattr(sys, 'frozen', False):
        return os.path.dirname(sys.executable)
    # todo_tracker/utils.py -> project root is two levels up
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def get_data_dir() -> str:
    return os.path.join(get_base_path(), "data")
