from direct.directnotify.DirectNotify import DirectNotify
from direct.directnotify.Notifier import Notifier

LOGGER = None

def get() -> Notifier:
    global LOGGER # pylint: disable=global-statement
    if LOGGER is None:
        LOGGER = DirectNotify().newCategory("ashikhminlut")
    return LOGGER

def debug(*args) -> None:
    get().debug(*args)

def info(*args) -> None:
    get().info(*args)

def warning(*args) -> None:
    get().warning(*args)

def set_verbose(verbose: bool) -> None:
    get().setDebug(verbose)
