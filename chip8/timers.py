# Delay and sound timers.
# Both count down toward zero at 60Hz, whatever the instruction rate is; the host calls
# tick() once per 60Hz period. A non-zero sound timer is the "tone audible" signal and
# listeners hear about it only when it changes.

import threading


class Timers:

    def __init__(self):
        self._lock = threading.Lock()
        self._notify_lock = threading.Lock()
        self._delay = 0
        self._sound = 0
        self._announced = False  # tone state the listeners were last told
        self._dirty = False
        self._listeners = []

    # ---- listeners ----
    def add_listener(self, callback):
        """``callback(active)`` runs when the tone turns on or off."""
        self._listeners.append(callback)

    def remove_listener(self, callback):
        self._listeners.remove(callback)

    def _sync_listeners(self):
        # One thread at a time announces, always the current state. A thread that finds
        # the announcer busy leaves _dirty set and the announcer picks it up.
        with self._lock:
            self._dirty = True
        while True:
            if not self._notify_lock.acquire(blocking=False):
                return
            try:
                while True:
                    with self._lock:
                        if not self._dirty:
                            break
                        self._dirty = False
                        active = self._sound != 0
                    if active != self._announced:
                        self._announced = active
                        for callback in list(self._listeners):
                            callback(active)
            finally:
                self._notify_lock.release()
            with self._lock:
                if not self._dirty:
                    return

    # ---- registers ----
    @property
    def delay(self):
        with self._lock:
            return self._delay

    @delay.setter
    def delay(self, value):
        with self._lock:
            self._delay = value & 0xFF

    @property
    def sound(self):
        with self._lock:
            return self._sound

    @sound.setter
    def sound(self, value):
        with self._lock:
            self._sound = value & 0xFF
        self._sync_listeners()

    @property
    def tone_active(self):
        return self.sound != 0

    # ---- 60Hz tick ----
    def tick(self):
        with self._lock:
            if self._delay > 0:
                self._delay -= 1
            stopped = False
            if self._sound > 0:
                self._sound -= 1
                stopped = self._sound == 0
        if stopped:
            self._sync_listeners()

    def reset(self):
        with self._lock:
            self._delay = 0
            self._sound = 0
        self._sync_listeners()
