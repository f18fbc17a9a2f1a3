"""Singleton pattern.

Several ways of restricting a class to exactly one instance: eager
construction, lazy construction, lazy construction guarded by a lock, a
metaclass, and a process-wide registry.
"""

import threading
from typing import Any, Dict, Optional, Type, TypeVar

from patternkit.logging.logger import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class _Greeter:
    """Shared illustrative behaviour."""

    def show_message(self) -> str:
        message = f"Hello from {type(self).__name__}"
        print(message)
        return message


class EagerSingleton(_Greeter):
    """Instance created when the module is imported."""

    _instance: Optional["EagerSingleton"] = None

    def __new__(cls) -> "EagerSingleton":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_instance(cls) -> "EagerSingleton":
        return cls._instance


EagerSingleton()


class LazySingleton(_Greeter):
    """Instance created on first access through get_instance() or the class. Not thread-safe."""

    _instance: Optional["LazySingleton"] = None

    def __new__(cls) -> "LazySingleton":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_instance(cls) -> "LazySingleton":
        return cls()

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None


class ThreadSafeSingleton(_Greeter):
    """
    Lazy singleton using double-checked locking.

    Calling the class directly also returns the shared instance; the
    initializer body runs only once.
    """

    _instance: Optional["ThreadSafeSingleton"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "ThreadSafeSingleton":
        """Ensure singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if hasattr(self, "_initialized"):
            return
        self.created_by = threading.current_thread().name
        self._initialized = True
        logger.debug("ThreadSafeSingleton created by %s", self.created_by)

    @classmethod
    def get_instance(cls) -> "ThreadSafeSingleton":
        return cls()

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None


class SingletonMeta(type):
    """Metaclass that turns every class using it into a singleton."""

    _instances: Dict[type, Any] = {}
    _lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        if cls not in SingletonMeta._instances:
            with SingletonMeta._lock:
                if cls not in SingletonMeta._instances:
                    SingletonMeta._instances[cls] = super().__call__(*args, **kwargs)
        return SingletonMeta._instances[cls]

    def reset_instance(cls) -> None:
        with SingletonMeta._lock:
            SingletonMeta._instances.pop(cls, None)


class AppSettings(_Greeter, metaclass=SingletonMeta):
    """Example class made a singleton by SingletonMeta."""

    def __init__(self, environment: str = "development"):
        self.environment = environment


class SingletonRegistry:
    """
    Process-wide registry of singleton instances.

    Any class can be used as a singleton by requesting it through the
    registry instead of constructing it directly.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.Lock()

    def __init__(self):
        self._instances: Dict[type, Any] = {}
        self._instances_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of a class, creating it on first request.

        Constructor arguments are only used when the instance is created.
        """
        with self._instances_lock:
            if singleton_class not in self._instances:
                logger.debug("Creating singleton instance of %s", singleton_class.__name__)
                self._instances[singleton_class] = singleton_class(*args, **kwargs)
            return self._instances[singleton_class]

    def has(self, singleton_class: type) -> bool:
        with self._instances_lock:
            return singleton_class in self._instances

    def reset(self, singleton_class: Optional[type] = None) -> None:
        """Forget one instance, or all of them."""
        with self._instances_lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)


def get_singleton(singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """
    Standard way to get singleton instances.

    Args:
        singleton_class: The class to get an instance of
        *args: Arguments to pass to the constructor if creating a new instance
        **kwargs: Keyword arguments to pass to the constructor if creating a new instance

    Returns:
        The singleton instance
    """
    return SingletonRegistry.get_instance().get(singleton_class, *args, **kwargs)


def demo() -> None:
    """Show that each variant hands out one shared instance."""
    variants = [
        ("EagerSingleton", EagerSingleton.get_instance, EagerSingleton.get_instance),
        ("LazySingleton", LazySingleton.get_instance, LazySingleton.get_instance),
        ("ThreadSafeSingleton", ThreadSafeSingleton, ThreadSafeSingleton.get_instance),
        ("AppSettings", AppSettings, AppSettings),
    ]
    for name, first_access, second_access in variants:
        first = first_access()
        second = second_access()
        first.show_message()
        print(f"{name}: same instance = {first is second}")
