"""
saga_storage – volatile, in-process storage for saga (workflow) state.

Import path convention::

    from saga_storage.sagas import InMemorySagaStorage, SagaData, CorrelationProperty
    from saga_storage.sagas.errors import ConcurrencyViolationError
    from saga_storage.config import SagaStorageSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
