import platform


def is_windows() -> bool:
    return "windows" == platform.system().lower()
