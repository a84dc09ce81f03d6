# resource_lifecycle/errors.py


class ResourceLifecycleError(Exception):
    """Базовое исключение пакета."""


class InvalidSizeError(ResourceLifecycleError, ValueError):
    """
    Отрицательный размер payload при конструировании.
    Бросается до любых побочных эффектов: счётчики не меняются.
    """

    def __init__(self, size: int):
        super().__init__(f"size must be non-negative, got {size}")
        self.size = size


class CopyForbiddenError(ResourceLifecycleError, TypeError):
    """Попытка скопировать ресурс (copy, deepcopy, pickle)."""


class HandleDestroyedError(ResourceLifecycleError):
    """Операция над хэндлом, чья область видимости уже закончилась."""


class ConfigError(ResourceLifecycleError):
    """Некорректный или нечитаемый YAML-конфиг."""
