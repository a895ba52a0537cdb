import threading
from functools import wraps

instances = {}
_instances_lock = threading.Lock()


def singleton(cls):
    """Calling the decorated class always returns its first instance."""
    @wraps(cls)
    def get_instance(*args, **kwargs):
        if cls not in instances:
            with _instances_lock:
                if cls not in instances:
                    instances[cls] = cls(*args, **kwargs)
        return instances[cls]

    return get_instance
