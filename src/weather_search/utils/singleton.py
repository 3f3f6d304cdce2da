class Singleton:
    """
    Base class for process-wide services.

    Subclasses are instantiated once; later constructor calls return the
    existing instance. Subclasses guard their own ``__init__`` with a marker
    attribute so state is not reset on every call.
    """

    _instances = {}

    def __new__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super(Singleton, cls).__new__(cls)
        return cls._instances[cls]

    def __init__(self, *args, **kwargs):
        if hasattr(self, "_initialized"):
            return
        self._initialized = True
        super().__init__()

    @classmethod
    def reset_instance(cls):
        """Forget the cached instance so the next call builds a fresh one."""
        cls._instances.pop(cls, None)
