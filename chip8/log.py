# Logs are off by default; flip them on with --log or F1 in the window.
import logging

logger = logging.getLogger("chip8")

#make it true if you want the logs
logsOn = False


def log(*args):
    if logsOn:
        logger.debug(" ".join(str(a) for a in args))


def set_logs(on):
    global logsOn
    logsOn = bool(on)
    if logsOn and not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
    return logsOn


def toggle_logs():
    return set_logs(not logsOn)
